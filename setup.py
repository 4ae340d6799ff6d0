"""Setup configuration for AdminView"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="adminview",
    version="1.0.0",
    author="AdminView",
    description="Administrator dashboard widgets with row-click multi-select grids",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["adminview", "adminview.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.6.1",
        "python-dateutil>=2.8.2",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.3",
            "pytest-qt>=4.2.0",
            "black>=23.12.1",
            "flake8>=6.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "adminview=adminview.main:main",
        ],
    },
    package_data={
        "adminview": ["ui/styles.qss"],
    },
    include_package_data=True,
)

"""
Standalone Dashboard Script
Run the AdminView dashboard directly from a source checkout
"""

if __name__ == '__main__':
    import sys
    from pathlib import Path

    # Add parent directory to path so we can import adminview
    sys.path.insert(0, str(Path(__file__).parent.parent))

    from adminview.main import main

    sys.exit(main())

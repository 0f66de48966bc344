"""
Run with: python -m imagegallery [catalog.json]
"""
from imagegallery.main import main

if __name__ == "__main__":
    main()

"""Entry point: python -m jwt_decode"""

from .cli import main

if __name__ == "__main__":
    main()

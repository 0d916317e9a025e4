"""Entry point for ``python -m bitbucket_v1``."""

from bitbucket_v1 import main

if __name__ == "__main__":
    main()

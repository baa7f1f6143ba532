"""Allow ``python -m git_commit_guide``, as used by the commit-msg hook."""

from .cli import main

if __name__ == "__main__":
    main()

"""Main entry point for rtformat when run as a module."""

from rtformat.engine import format_string
from rtformat.project_info import get_project_info


def main():
    """Print project name, version and description."""
    info = get_project_info()
    print(format_string("{name} v{version}: {description}", **info.model_dump()))


if __name__ == "__main__":
    main()

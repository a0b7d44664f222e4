"""Example demonstrating runtime formatting with rtformat.

This example shows templates chosen at runtime, indirect widths and
precisions, a caller-defined value type, and strict argument checking.
"""

from rtformat import Capability
from rtformat import FormatConfig
from rtformat import FormatError
from rtformat import FormatSpec
from rtformat import RuntimeFormatter
from rtformat import format_string

# Column widths for the report table
NAME_WIDTH = 10
AMOUNT_WIDTH = 12


class Money:
    """An amount in cents that renders itself as currency."""

    def __init__(self, cents: int, currency: str = "EUR") -> None:
        """Initialize with an amount in cents."""
        self.cents = cents
        self.currency = currency

    def format_capabilities(self) -> frozenset[Capability]:
        """Money renders as display and debug text only."""
        return frozenset({Capability.DISPLAY, Capability.DEBUG})

    def format_display(self, spec: FormatSpec) -> str:
        """Render as e.g. ``12.50 EUR``."""
        return f"{self.cents // 100}.{self.cents % 100:02d} {self.currency}"

    def format_debug(self, spec: FormatSpec) -> str:
        """Render the raw fields."""
        return f"Money(cents={self.cents}, currency={self.currency!r})"


def basic_usage() -> None:
    """Format a few templates with positional, named and implicit arguments."""
    print(format_string("Hello, {}!", "world"))
    print(format_string("{0} + {0} = {1}", 2, 4))
    print(format_string("{name:>8}|{value:+08.3}", name="pi", value=3.14159))
    print(format_string("{:#x} {:#b} {:e}", 255, 5, 1234.5))
    print(format_string("{:?}", "quoted"))


def report_table() -> None:
    """Render a table whose layout comes from arguments."""
    template = "{0:<2$}|{1:>3$}"
    rows = [("coffee", Money(350)), ("lunch", Money(1250))]
    for label, amount in rows:
        print(format_string(template, label, amount, NAME_WIDTH, AMOUNT_WIDTH))
    print(format_string("{:.*}", 2, 2.0 / 3.0))


def strict_mode() -> None:
    """Reject calls that leave arguments unused."""
    formatter = RuntimeFormatter(FormatConfig(require_all_arguments=True))
    try:
        formatter.format("{a}", a=1, b=2)
    except FormatError as e:
        print(f"Rejected: {e}")


def main() -> None:
    """Run every example."""
    basic_usage()
    report_table()
    strict_mode()


if __name__ == "__main__":
    main()

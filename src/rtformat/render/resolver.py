"""Argument list and selector resolution."""

from collections.abc import Mapping
from collections.abc import Sequence

from rtformat.core.errors import ImplicitArgumentExhaustedError
from rtformat.core.errors import InvalidCountError
from rtformat.core.errors import MissingArgumentError
from rtformat.render.values import BoundValue
from rtformat.render.values import bind
from rtformat.template.types import ArgumentSelector
from rtformat.template.types import Count
from rtformat.template.types import ImplicitSelector
from rtformat.template.types import LiteralCount
from rtformat.template.types import NamedSelector
from rtformat.template.types import PositionalSelector


class Arguments:
    """Runtime argument list plus optional name table, bound for one call."""

    def __init__(
        self,
        positional: Sequence[object] = (),
        named: Mapping[str, object] | None = None,
    ) -> None:
        """Bind every positional and named value.

        Args:
            positional: Values addressable by index and by implicit order
            named: Values addressable by identifier

        """
        self.positional: tuple[BoundValue, ...] = tuple(bind(v) for v in positional)
        self.named: dict[str, BoundValue] = {
            name: bind(v) for name, v in (named or {}).items()
        }


class ArgumentResolver:
    """Resolve selectors against an argument list.

    The implicit cursor starts at zero and advances only when an implicit
    selector is resolved; positional and named lookups never move it.
    """

    def __init__(self, arguments: Arguments, *, max_count: int | None = None) -> None:
        """Initialize a resolver for one formatting call.

        Args:
            arguments: Bound argument list and name table
            max_count: Optional upper bound on resolved counts

        """
        self.arguments = arguments
        self.max_count = max_count
        self.cursor = 0
        self.used_positions: set[int] = set()
        self.used_names: set[str] = set()

    def resolve(
        self, selector: ArgumentSelector, *, offset: int | None = None
    ) -> BoundValue:
        """Return the value a selector refers to.

        Args:
            selector: Which argument to fetch
            offset: Template offset reported in errors

        Returns:
            The bound value

        Raises:
            ImplicitArgumentExhaustedError: When no positional argument is left
            MissingArgumentError: When the index or name is not bound

        """
        positional = self.arguments.positional
        match selector:
            case ImplicitSelector():
                if self.cursor >= len(positional):
                    raise ImplicitArgumentExhaustedError(
                        selector, consumed=self.cursor, offset=offset
                    )
                index = self.cursor
                self.cursor += 1
            case PositionalSelector(index=index):
                if index >= len(positional):
                    raise MissingArgumentError(selector, offset=offset)
            case NamedSelector(name=name):
                if name not in self.arguments.named:
                    raise MissingArgumentError(selector, offset=offset)
                self.used_names.add(name)
                return self.arguments.named[name]
        self.used_positions.add(index)
        return positional[index]

    def resolve_count(
        self, count: Count | None, *, offset: int | None = None
    ) -> int | None:
        """Resolve a width or precision to a concrete integer.

        Args:
            count: Literal or indirect count, or None when absent
            offset: Template offset reported in errors

        Returns:
            The count, or None when absent

        Raises:
            InvalidCountError: When the argument is not a non-negative integer
                or exceeds the configured maximum

        """
        if count is None:
            return None
        if isinstance(count, LiteralCount):
            value = count.value
        else:
            bound = self.resolve(count.selector, offset=offset)
            value = bound.as_count()
            if value is None:
                raise InvalidCountError(
                    count.selector,
                    bound.value,
                    "expected a non-negative integer",
                    offset=offset,
                )
        if self.max_count is not None and value > self.max_count:
            selector = None if isinstance(count, LiteralCount) else count.selector
            raise InvalidCountError(
                selector,
                value,
                f"exceeds maximum of {self.max_count}",
                offset=offset,
            )
        return value

    def unused_positions(self) -> list[int]:
        """Positional indices no selector has referred to."""
        count = len(self.arguments.positional)
        return [i for i in range(count) if i not in self.used_positions]

    def unused_names(self) -> list[str]:
        """Name-table entries no selector has referred to."""
        return sorted(set(self.arguments.named) - self.used_names)

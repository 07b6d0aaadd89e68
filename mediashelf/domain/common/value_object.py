"""Value objects: immutable and compared by their attributes."""

from dataclasses import fields


class ValueObject:
    """
    Base for ``@dataclass(frozen=True)`` value objects.

    Equality, hashing and immutability come from the frozen dataclass. Item
    targets and entity ids build on this.
    """

    def to_primitive(self) -> object:
        """Collapse a single-field value object to its value, else to a dict."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]
        if len(values) == 1:
            return next(iter(values.values()))
        return values

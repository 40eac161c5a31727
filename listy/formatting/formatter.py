"""
Placeholder-substitution formatting over character sequences.

Each placeholder in a template consumes the next substitution value and
is replaced by that value's character form; every other character is
copied unchanged. Values left over once the template is exhausted are
ignored.
"""

from dataclasses import asdict
from typing import Any, Optional, Union

from listy.config.defaults import FormatterParams
from listy.config.loader import ConfigLoader
from listy.config.validation import ConfigValidator
from listy.errors import ArgumentCountMismatchError, ConfigurationError, InvalidArgumentError
from listy.logging.config import configure_logging, get_formatter_logger, log_format_call
from listy.sequence import (
    EMPTY,
    Node,
    Sequence,
    car,
    cdr,
    cons,
    from_iterable,
    is_nil,
    length,
    reverse,
    to_str,
)
from listy.sequence.models import ensure_sequence

from .conversion import to_chars

DEFAULT_PLACEHOLDER = FormatterParams.placeholder

ArgsLike = Union[Sequence[Any], list, tuple]


def _as_sequence(args: ArgsLike) -> Sequence[Any]:
    """Accept Python lists and tuples wherever an argument sequence is expected."""
    if isinstance(args, (list, tuple)):
        return from_iterable(args)
    ensure_sequence(args, "args")
    return args


def count_placeholders(template: Sequence[str], placeholder: str = DEFAULT_PLACEHOLDER) -> int:
    """Number of placeholder markers in a template."""
    ensure_sequence(template, "template")
    return sum(1 for char in template if char == placeholder)


def format_template(
    template: Sequence[str],
    args: ArgsLike,
    placeholder: str = DEFAULT_PLACEHOLDER
) -> Sequence[str]:
    """
    Substitute arguments into a template character sequence.

    Args:
        template: Character sequence containing placeholder markers
        args: Substitution values, consumed one per placeholder
        placeholder: Single-character marker to replace

    Returns:
        Formatted character sequence

    Raises:
        ArgumentCountMismatchError: If the template has more placeholders
            than there are values in args
        InvalidArgumentError: If template or args is not a sequence
    """
    ensure_sequence(template, "template")
    values = _as_sequence(args)

    output: Sequence[str] = EMPTY
    remaining = values
    node = template
    while isinstance(node, Node):
        char = node.head
        if char == placeholder:
            if is_nil(remaining):
                needed = count_placeholders(template, placeholder)
                provided = length(values)
                raise ArgumentCountMismatchError(
                    f"Template has {needed} placeholders but only {provided} arguments were given",
                    placeholders=needed,
                    provided=provided,
                )
            for value_char in to_chars(car(remaining)):
                output = cons(value_char, output)
            remaining = cdr(remaining)
        else:
            output = cons(char, output)
        node = node.tail

    return reverse(output)


def format_string(template: str, *args: Any, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """
    Format a Python string template with positional arguments.

    Example:
        >>> format_string("%-%", "x", "y")
        'x-y'
    """
    if not isinstance(template, str):
        raise InvalidArgumentError(
            f"Template must be a string, got {type(template).__name__}",
            parameter="template",
            value=template,
        )
    return to_str(format_template(from_iterable(template), args, placeholder))


class TemplateFormatter:
    """Configured formatter that logs each formatting call"""

    def __init__(self, params: Optional[FormatterParams] = None):
        self.params = params or FormatterParams()

        errors = ConfigValidator.validate_formatter_params(asdict(self.params))
        if errors:
            raise ConfigurationError(
                f"Invalid formatter parameters: {errors[0].field}: {errors[0].message}",
                errors=errors,
            )

        self.logger = get_formatter_logger(__name__).bind(placeholder=self.params.placeholder)

    @classmethod
    def from_config(
        cls,
        loader: Optional[ConfigLoader] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> "TemplateFormatter":
        """Create a formatter and apply logging settings from the merged configuration."""
        loader = loader or ConfigLoader.create()
        config = loader.load(overrides)
        configure_logging(**asdict(config.logging))
        return cls(config.formatter)

    @property
    def placeholder(self) -> str:
        return self.params.placeholder

    def format(self, template: Sequence[str], args: ArgsLike) -> Sequence[str]:
        """
        Format a template character sequence.

        Args:
            template: Character sequence containing placeholder markers
            args: Substitution values

        Returns:
            Formatted character sequence
        """
        values = _as_sequence(args)
        try:
            result = format_template(template, values, self.placeholder)
        except ArgumentCountMismatchError as e:
            self.logger.warning(
                "Not enough arguments for template",
                placeholders=e.placeholders,
                provided=e.provided,
            )
            raise

        log_format_call(
            self.logger,
            template_length=length(template),
            placeholders=count_placeholders(template, self.placeholder),
            provided=length(values),
        )
        return result

    def format_string(self, template: str, *args: Any) -> str:
        """Format a Python string template with positional arguments."""
        if not isinstance(template, str):
            raise InvalidArgumentError(
                f"Template must be a string, got {type(template).__name__}",
                parameter="template",
                value=template,
            )
        return to_str(self.format(from_iterable(template), args))

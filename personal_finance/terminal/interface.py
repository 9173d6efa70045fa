"""
Abstract Terminal Interface

DESIGN DECISION: The controller never touches stdin/stdout directly.
It talks to a TerminalIO, which allows us to:
1. Run the real menu on a console
2. Drive the whole menu from scripted input in tests

Only raw line input and output are abstract. Numeric reads are built on
top of them here, so every terminal gets the same retry behaviour.
"""

from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, TypeVar

from tenacity import RetryCallState, Retrying, retry_if_exception_type


N = TypeVar("N", int, Decimal)


class InvalidNumberError(ValueError):
    """Input could not be used as a number. The user is asked again."""
    pass


class TerminalIO(ABC):
    """
    Line-oriented console contract.

    read_integer / read_decimal block until a usable number is entered.
    They never raise InvalidNumberError to the caller.
    """

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """
        Show `prompt` and return the raw line entered (may be empty).

        Raises:
            EOFError: If input has ended
        """
        pass

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        """Write one line of output."""
        pass

    def read_integer(
        self,
        prompt: str,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
    ) -> int:
        return self._read_number(prompt, int, minimum, maximum)

    def read_decimal(
        self,
        prompt: str,
        minimum: Optional[Decimal] = None,
        maximum: Optional[Decimal] = None,
        places: Optional[int] = None,
    ) -> Decimal:
        """
        Read a Decimal within [minimum, maximum].

        places caps the digits after the decimal point, so an accepted
        amount is always stored exactly.
        """
        return self._read_number(prompt, Decimal, minimum, maximum, places)

    def _read_number(
        self,
        prompt: str,
        parse: Callable[[str], N],
        minimum: Optional[N],
        maximum: Optional[N] = None,
        places: Optional[int] = None,
    ) -> N:
        for attempt in Retrying(
            retry=retry_if_exception_type(InvalidNumberError),
            before_sleep=self._report_invalid_input,
        ):
            with attempt:
                return self._parse_number(
                    self.read_line(prompt), parse, minimum, maximum, places
                )

    def _parse_number(
        self,
        raw: str,
        parse: Callable[[str], N],
        minimum: Optional[N],
        maximum: Optional[N] = None,
        places: Optional[int] = None,
    ) -> N:
        try:
            value = parse(raw.strip())
        except (ValueError, InvalidOperation) as e:
            raise InvalidNumberError("Invalid input. Please enter a number.") from e

        if isinstance(value, Decimal) and not value.is_finite():
            raise InvalidNumberError("Invalid input. Please enter a number.")

        if minimum is not None and value < minimum:
            raise InvalidNumberError(f"Please enter a value of at least {minimum}.")

        if maximum is not None and value > maximum:
            raise InvalidNumberError(f"Please enter a value of at most {maximum}.")

        if places is not None and isinstance(value, Decimal) and _decimal_places(value) > places:
            raise InvalidNumberError(
                f"Please enter at most {places} digits after the decimal point."
            )

        return value

    def _report_invalid_input(self, retry_state: RetryCallState) -> None:
        self.write_line(str(retry_state.outcome.exception()))


def _decimal_places(value: Decimal) -> int:
    """Digits after the decimal point, ignoring trailing zeros."""
    _, digits, exponent = value.as_tuple()
    while digits and digits[-1] == 0 and exponent < 0:
        digits = digits[:-1]
        exponent += 1
    return max(-exponent, 0)

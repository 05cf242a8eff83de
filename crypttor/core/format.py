"""Transport encodings for framed ciphertext."""
import base64
import binascii
from enum import IntEnum
from typing import Union

from .exceptions import InvalidFormat, FormatError


class Format(IntEnum):
    """Output/input format selector."""
    RAW = 0
    BASE64 = 1
    HEX = 2


class FormatCodec:
    """Converts framed ciphertext to and from its transport encoding."""

    @staticmethod
    def validate(selector) -> Format:
        """
        Validates a format selector.

        Accepts a Format member, its integer value or its name
        (case-insensitive, e.g. "hex").

        Raises:
            InvalidFormat: If selector is not one of the three formats
        """
        if isinstance(selector, Format):
            return selector
        if isinstance(selector, str):
            try:
                return Format[selector.strip().upper()]
            except KeyError:
                raise InvalidFormat(f"Format not valid: {selector!r}") from None
        # bool is an int subclass, but True/False are not selectors
        if isinstance(selector, int) and not isinstance(selector, bool):
            try:
                return Format(selector)
            except ValueError:
                raise InvalidFormat(f"Format not valid: {selector!r}") from None
        raise InvalidFormat(f"Format not valid: {selector!r}")

    @staticmethod
    def encode(data: bytes, selector) -> Union[bytes, str]:
        """Encodes raw bytes: RAW as-is, BASE64 standard text, HEX lowercase."""
        fmt = FormatCodec.validate(selector)
        if fmt is Format.BASE64:
            return base64.b64encode(data).decode('ascii')
        if fmt is Format.HEX:
            return data.hex()
        return bytes(data)

    @staticmethod
    def decode(data: Union[str, bytes], selector) -> bytes:
        """
        Decodes transport text back to raw bytes.

        Raises:
            FormatError: If data is not valid for the selected format
        """
        fmt = FormatCodec.validate(selector)
        if fmt is Format.RAW:
            if isinstance(data, str):
                raise FormatError("Raw format input must be bytes, not str")
            return bytes(data)

        if isinstance(data, str):
            try:
                data = data.encode('ascii')
            except UnicodeEncodeError:
                raise FormatError(f"{fmt.name.lower()} input contains non-ASCII characters") from None

        try:
            if fmt is Format.BASE64:
                return base64.b64decode(data, validate=True)
            return binascii.unhexlify(data)
        except (binascii.Error, ValueError) as e:
            raise FormatError(f"Invalid {fmt.name.lower()} input: {e}") from e

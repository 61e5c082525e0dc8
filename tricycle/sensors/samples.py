"""
Recorded sensor samples and the CSV reader for them.

Input lines hold ``time,steering_angle,encoder_ticks``. Lines starting with
'#' are comments. By default numeric fields are read the way C's atof/atoi
read them: the longest numeric prefix is used and anything unparsable
becomes 0, so a bad field never aborts a run. Strict mode raises instead.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

FIELD_SEPARATOR = ','
COMMENT_PREFIX = '#'

_FLOAT_PREFIX = re.compile(
    r'\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)',
    re.IGNORECASE)
_INT_PREFIX = re.compile(r'\s*[+-]?\d+')


class SampleFormatError(ValueError):
    """Raised in strict mode when an input line has a malformed field."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


@dataclass
class Sample:
    """One recorded sensor reading."""

    time: float                    # s
    steering_angle: float          # rad
    encoder_ticks: int             # ticks since the previous sample
    angular_velocity: float = 0.0  # rad/s from a real gyro, not read from input


def parse_float_field(text: str) -> float:
    """Parse a float the way atof does (numeric prefix, else 0.0)."""
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group(0))


def parse_int_field(text: str) -> int:
    """Parse an int the way atoi does (digit prefix, else 0)."""
    match = _INT_PREFIX.match(text)
    if not match:
        return 0
    return int(match.group(0))


def _parse_strict(text: str, kind, name: str, line_number: Optional[int]):
    try:
        return kind(text.strip())
    except ValueError:
        raise SampleFormatError(f"invalid {name} field {text!r}", line_number) from None


def parse_sample_line(line: str, strict: bool = False,
                      line_number: Optional[int] = None) -> Optional[Sample]:
    """
    Parse one input line.

    Args:
        line: Raw text line
        strict: Raise SampleFormatError on malformed fields instead of
            falling back to 0
        line_number: Used in error messages

    Returns:
        Sample, or None for comment and blank lines
    """
    line = line.rstrip('\r\n')
    if not line.strip() or line.startswith(COMMENT_PREFIX):
        return None

    fields = line.split(FIELD_SEPARATOR)
    # Missing trailing fields read as empty
    fields += [''] * (3 - len(fields))
    time_str, steer_str, ticks_str = fields[:3]

    if strict:
        return Sample(
            time=_parse_strict(time_str, float, 'time', line_number),
            steering_angle=_parse_strict(steer_str, float, 'steering_angle', line_number),
            encoder_ticks=_parse_strict(ticks_str, int, 'encoder_ticks', line_number),
        )

    return Sample(
        time=parse_float_field(time_str),
        steering_angle=parse_float_field(steer_str),
        encoder_ticks=parse_int_field(ticks_str),
    )


def read_samples(path: str, strict: bool = False) -> List[Sample]:
    """
    Read all samples from a CSV file, in file order.

    Raises:
        OSError: If the file cannot be opened or read
        SampleFormatError: On a malformed field in strict mode
    """
    samples = []
    with open(path, 'r') as f:
        for line_number, line in enumerate(f, start=1):
            sample = parse_sample_line(line, strict=strict, line_number=line_number)
            if sample is not None:
                samples.append(sample)
    return samples

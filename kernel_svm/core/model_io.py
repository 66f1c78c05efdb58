# File: kernel_svm/core/model_io.py

"""
Text codec for trained SVM models

Model files follow a fixed, line-oriented grammar:

    %SVM
    numsv=<int>;
    kernel='<kernel-name>';
    b=<float>;
    alphas=[
    	[<float>,<int>];
    	...
    ];

Floats are written as ``%+10.16e`` so a save/load cycle reproduces every
alpha and the bias exactly. Fields are read strictly in the order above.
Whitespace between fields is free; literal tokens are not.
"""

import logging
import re
from typing import IO, Optional, TYPE_CHECKING

from ..exceptions import FormatError, PreconditionError

if TYPE_CHECKING:
    from .svm import SVM

logger = logging.getLogger(__name__)

HEADER = '%SVM'
ALPHAS_OPEN = 'alphas=['
ALPHAS_CLOSE = '];'
FLOAT_FORMAT = '%+10.16e'

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

_WHITESPACE = re.compile(r'\s*')
_TOKEN = re.compile(r'\S+')
_INT = re.compile(r'[+-]?\d+')
_FLOAT = re.compile(
    r'[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)',
    re.IGNORECASE
)


class ModelScanner:
    """
    Cursor over a model stream with scanf-like primitives.

    Input is pulled one line at a time, so after the closing ``];`` the
    stream is left at the start of the following line.
    """

    def __init__(self, stream: IO):
        self.stream = stream
        self.text = ''
        self.pos = 0
        self._eof = False

    def _pull_line(self) -> bool:
        """Replace the consumed buffer with the next line, False at end of stream."""

        if self._eof:
            return False

        line = self.stream.readline()
        if not line:
            self._eof = True
            return False
        if isinstance(line, bytes):
            line = line.decode('utf-8')

        self.text = self.text[self.pos:] + line
        self.pos = 0
        return True

    def skip_whitespace(self) -> None:
        while True:
            self.pos = _WHITESPACE.match(self.text, self.pos).end()
            if self.pos < len(self.text) or not self._pull_line():
                return

    def exhausted(self) -> bool:
        """True once only whitespace is left."""
        self.skip_whitespace()
        return self.pos >= len(self.text)

    def read_token(self, max_width: int) -> Optional[str]:
        """Up to ``max_width`` non-blank characters, None at end of input."""

        self.skip_whitespace()
        match = _TOKEN.match(self.text, self.pos)
        if match is None:
            return None

        token = match.group()[:max_width]
        self.pos += len(token)
        return token

    def expect(self, literal: str) -> bool:
        self.skip_whitespace()
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def expect_exact(self, literal: str) -> bool:
        """Match ``literal`` at the cursor without skipping whitespace."""
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def read_int(self) -> Optional[int]:
        self.skip_whitespace()
        match = _INT.match(self.text, self.pos)
        if match is None:
            return None

        value = int(match.group())
        if not INT32_MIN <= value <= INT32_MAX:
            return None

        self.pos = match.end()
        return value

    def read_float(self) -> Optional[float]:
        self.skip_whitespace()
        match = _FLOAT.match(self.text, self.pos)
        if match is None:
            return None

        self.pos = match.end()
        return float(match.group())

    def read_until(self, terminator: str) -> Optional[str]:
        """Characters up to ``terminator`` on the current line."""

        if self.pos >= len(self.text):
            self._pull_line()

        end = self.text.find(terminator, self.pos)
        if end < 0:
            return None

        value = self.text[self.pos:end]
        if '\n' in value:
            return None

        self.pos = end
        return value


class _ModelParser:

    def __init__(self, svm: 'SVM', scanner: ModelScanner):
        self.svm = svm
        self.scanner = scanner
        self.line_number = 1

    def fail(self, detail: str) -> None:
        raise FormatError(self.line_number, detail)

    def advance_line(self) -> None:
        self.scanner.skip_whitespace()
        if not self.scanner.exhausted():
            self.line_number += 1

    def parse(self) -> None:
        scanner = self.scanner

        header = scanner.read_token(len(HEADER))
        if header is None:
            self.fail("unexpected end of file, expected header")
        if header != HEADER:
            self.fail(f"expected {HEADER!r}, got {header!r}")
        self.line_number += 1

        num_sv = None
        if scanner.expect('numsv='):
            num_sv = scanner.read_int()
        if num_sv is None or not scanner.expect(';'):
            self.fail("expected 'numsv=<int>;'")
        if num_sv < 0:
            self.fail(f"negative number of support vectors: {num_sv}")
        self.advance_line()

        logger.info(f"loading {num_sv} support vectors")
        self.svm.create_new_model(num_sv)

        kernel_name = None
        if scanner.expect("kernel='"):
            kernel_name = scanner.read_until("'")
        if kernel_name is None or not scanner.expect_exact("';"):
            self.fail("expected \"kernel='<name>';\"")
        self.svm.loaded_kernel_name_ = kernel_name
        self.advance_line()

        bias = None
        if scanner.expect('b='):
            bias = scanner.read_float()
        if bias is None or not scanner.expect(';'):
            self.fail("expected 'b=<float>;'")
        self.advance_line()
        self.svm.set_bias(bias)

        opening = scanner.read_token(len(ALPHAS_OPEN))
        if opening is None:
            self.fail(f"unexpected end of file, expected {ALPHAS_OPEN!r}")
        if opening != ALPHAS_OPEN:
            self.fail(f"expected {ALPHAS_OPEN!r}, got {opening!r}")
        self.line_number += 1

        for i in range(num_sv):
            alpha, index = self._parse_row()
            if alpha is None or index is None:
                self.fail(f"expected '[<float>,<int>];' for support vector {i}")
            self.advance_line()

            self.svm.set_support_vector(i, index)
            self.svm.set_alpha(i, alpha)

        closing = scanner.read_token(len(ALPHAS_CLOSE))
        if closing is None:
            self.fail(f"unexpected end of file, expected {ALPHAS_CLOSE!r}")
        if closing != ALPHAS_CLOSE:
            self.fail(f"expected {ALPHAS_CLOSE!r}, got {closing!r}")
        self.line_number += 1

    def _parse_row(self):
        scanner = self.scanner

        if not scanner.expect('['):
            return None, None
        alpha = scanner.read_float()
        if alpha is None or not scanner.expect(','):
            return None, None
        index = scanner.read_int()
        if index is None or not scanner.expect(']') or not scanner.expect(';'):
            return None, None
        return alpha, index


def read_model(svm: 'SVM', stream: IO, diagnostics: Optional[logging.Logger] = None) -> bool:
    """
    Restore ``svm`` from a model stream.

    Returns True on success. On a malformed stream the FormatError is logged
    to ``diagnostics`` (the module logger by default), kept on
    ``svm.load_error_`` and False is returned. The model is reallocated as
    soon as ``numsv`` has been read, so a failure further down leaves a
    freshly allocated but unloaded model behind.
    """

    diagnostics = diagnostics or logger

    svm.svm_loaded = False
    svm.load_error_ = None

    parser = _ModelParser(svm, ModelScanner(stream))
    try:
        try:
            parser.parse()
        except UnicodeDecodeError as e:
            raise FormatError(parser.line_number, f"invalid UTF-8 in model text: {e.reason}") from e
    except FormatError as e:
        diagnostics.error(str(e))
        svm.load_error_ = e
        return False

    svm.svm_loaded = True
    return True


def write_model(svm: 'SVM', stream: IO) -> bool:
    """Write ``svm`` to a text stream in the model-file grammar."""

    kernel = svm.get_kernel()
    if kernel is None:
        raise PreconditionError("no kernel defined")

    logger.info("Writing model file...")

    num_sv = svm.get_num_support_vectors()
    stream.write(f"{HEADER}\n")
    stream.write(f"numsv={num_sv};\n")
    stream.write(f"kernel='{kernel.get_name()}';\n")
    stream.write(f"b={FLOAT_FORMAT % svm.get_bias()};\n")

    stream.write(f"{ALPHAS_OPEN}\n")
    for i in range(num_sv):
        stream.write(f"\t[{FLOAT_FORMAT % svm.get_alpha(i)},{svm.get_support_vector(i)}];\n")
    stream.write(f"{ALPHAS_CLOSE}\n")

    logger.debug(f"Model file written: {num_sv} support vectors")
    return True

"""
Formula evaluation against a CellStore.

``evaluate`` turns the raw content of a cell into its display value:

1. Literal content (anything not starting with ``=``) is returned as-is.
2. A formula is tokenized once. Every reference token is resolved through
   the store: formula cells are pushed on an explicit work stack and
   finished before their caller resumes, literal cells are read by numeric
   coercion (non-numeric and empty text read as 0). A reference to row 0
   lies above the grid and reads as an empty cell.
3. The resolved token stream is evaluated by the closed arithmetic grammar
   in ``gridcalc.formula.arithmetic`` and rounded to 10 decimal places.

Cycle detection uses an evaluation stack: the formulas on the path from the
top-level cell to the one being resolved. Re-entering an address on the
stack yields ``#CIRCULAR!`` for the cells of that cycle; a formula outside
the cycle that depends on it yields ``#ERROR!``, as does any other failure.
Both are returned as ``DisplayError`` values, never raised.

Nothing is cached between calls: each call re-evaluates the dependency
subtree, so a read always reflects the store as it is at that moment.
Within one call a cell reached twice is evaluated once.
"""

from __future__ import annotations

import logging
import math
import re
from enum import Enum
from typing import Dict, List, Optional, Set, Union

from gridcalc.exceptions import (
    CircularReferenceError,
    FormulaError,
    FormulaEvaluationError,
)
from gridcalc.formula.arithmetic import evaluate_tokens
from gridcalc.formula.tokenizer import (
    FORMULA_PREFIX,
    Token,
    is_formula,
    reference_tokens,
    tokenize,
)
from gridcalc.spreadsheet.model import CellAddress, decode_address
from gridcalc.spreadsheet.store import AddressLike, CellStore

logger = logging.getLogger(__name__)

ROUND_DIGITS = 10

# Plain decimal text as a JavaScript Number() cast reads it.
_NUMERIC_LITERAL_RE = re.compile(r"\s*[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?\s*")


class DisplayError(str, Enum):
    """Error sentinels rendered in place of a formula's value."""
    CIRCULAR = "#CIRCULAR!"
    ERROR = "#ERROR!"

    def __str__(self) -> str:
        return self.value


DisplayValue = Union[str, float, DisplayError]


def references(content: str) -> List[CellAddress]:
    """Direct dependencies of a formula, in order of first appearance.

    Reference tokens that do not decode to an address (row 0) are skipped.
    Literal content has no dependencies.
    """
    if not is_formula(content):
        return []
    seen: List[CellAddress] = []
    for token in reference_tokens(content[len(FORMULA_PREFIX):]):
        address = decode_address(token.text)
        if address is not None and address not in seen:
            seen.append(address)
    return seen


def is_numeric_literal(content: str) -> bool:
    return _NUMERIC_LITERAL_RE.fullmatch(content) is not None


def coerce_literal(content: str) -> float:
    """Numeric value of literal cell content; non-numeric or empty text is 0."""
    if not is_numeric_literal(content):
        return 0.0
    return float(content)


def evaluate(content: str, self_address: AddressLike, store: CellStore) -> DisplayValue:
    """Compute the display value of ``content`` stored at ``self_address``.

    Args:
        content: Raw cell content
        self_address: Address the content lives at (seeds cycle detection)
        store: Store that references are resolved against

    Returns:
        The literal text unchanged, the rounded numeric result, or a
        DisplayError sentinel
    """
    if not is_formula(content):
        return content

    address = CellAddress.coerce(self_address)
    try:
        return _evaluate_formula(content, address, store)
    except CircularReferenceError as exc:
        logger.debug("Circular reference evaluating %s: %s", address, exc)
        return DisplayError.CIRCULAR
    except FormulaError as exc:
        logger.debug("Error evaluating %s %r: %s", address, content, exc)
        return DisplayError.ERROR


def display_value(address: AddressLike, store: CellStore) -> DisplayValue:
    """Display value of the cell at ``address``."""
    address = CellAddress.coerce(address)
    return evaluate(store.get(address), address, store)


def format_display(value: DisplayValue) -> str:
    """Render a display value as text: ``8.0 -> "8"``, ``2.5 -> "2.5"``."""
    if isinstance(value, DisplayError):
        return value.value
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return value


class _Frame:
    """A formula on the evaluation stack, resolved token by token."""

    def __init__(self, address: CellAddress, content: str) -> None:
        self.address = address
        self.tokens = tokenize(content[len(FORMULA_PREFIX):])
        self.resolved: List[Token] = []

    @property
    def done(self) -> bool:
        return len(self.resolved) == len(self.tokens)

    def next_token(self) -> Token:
        return self.tokens[len(self.resolved)]

    def result(self) -> float:
        result = evaluate_tokens(self.resolved)
        if not math.isfinite(result):
            raise FormulaEvaluationError(f"Non-finite result in {self.address}")
        # Adding 0.0 normalizes -0.0.
        return round(result, ROUND_DIGITS) + 0.0


def _evaluate_formula(content: str, address: CellAddress, store: CellStore) -> float:
    """Evaluate a formula without recursing into the interpreter stack.

    ``frames`` is the evaluation stack and ``on_path`` its address set. A
    formula dependency is pushed as a new frame; when a frame finishes, its
    value is handed to the frame below, which resumes at the same token.
    Chain depth is therefore bounded only by the grid.
    """
    frames = [_Frame(address, content)]
    on_path: Set[CellAddress] = {address}
    values: Dict[CellAddress, float] = {}

    while True:
        frame = frames[-1]
        try:
            dependency = _advance(frame, store, on_path, values)
            if dependency is not None:
                frames.append(dependency)
                on_path.add(dependency.address)
                continue
            value = frame.result()
        except FormulaError as exc:
            raise _unwind(exc, frames) from None

        frames.pop()
        on_path.discard(frame.address)
        values[frame.address] = value
        if not frames:
            return value
        caller = frames[-1]
        caller.resolved.append(caller.next_token().resolved(value))


def _advance(
    frame: _Frame,
    store: CellStore,
    on_path: Set[CellAddress],
    values: Dict[CellAddress, float],
) -> Optional[_Frame]:
    """Resolve ``frame``'s tokens up to its next unevaluated formula dependency.

    Returns:
        A frame for that dependency, or None once every token is resolved
    """
    while not frame.done:
        token = frame.next_token()
        if not token.is_reference:
            frame.resolved.append(token)
            continue
        address = decode_address(token.text)
        if address is None:
            # Row 0, above the grid: an empty cell.
            frame.resolved.append(token.resolved(0.0))
            continue
        if address in on_path:
            raise CircularReferenceError(address)
        if address in values:
            frame.resolved.append(token.resolved(values[address]))
            continue
        content = store.get(address)
        if is_formula(content):
            return _Frame(address, content)
        frame.resolved.append(token.resolved(coerce_literal(content)))
    return None


def _unwind(error: FormulaError, frames: List[_Frame]) -> FormulaError:
    """Carry ``error`` out through every frame on the stack, innermost first.

    A circular reference stays circular through the cells of the cycle, the
    last of which is the re-entered address. Frames below that cell are
    outside the cycle and see an ordinary evaluation error.
    """
    closed = False
    for frame in reversed(frames):
        if not isinstance(error, CircularReferenceError):
            break
        if closed:
            error = FormulaEvaluationError(
                f"{frame.address} depends on a circular reference through {error.address}"
            )
        elif frame.address == error.address:
            closed = True
    return error

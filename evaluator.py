# evaluator.py
"""
Restricted arithmetic evaluator.

Grammar (whitespace-insensitive, identifiers case-insensitive):

    expr    := term (('+' | '-') term)*
    term    := power (('*' | '/') power)*
    power   := unary ('^' power)?
    unary   := ('-' | '+') unary | primary
    primary := NUMBER | CONSTANT | FUNCTION '(' expr ')' | '(' expr ')'

Unary minus binds tighter than '^', so "-2^2" is 4 and "10^-3" is 0.001.
Nothing outside the whitelists below is ever looked up or executed.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Callable, Dict, List, Optional, Tuple

from errors import InvalidExpressionError

logger = logging.getLogger(__name__)

MAX_EXPRESSION_LENGTH = 200
_MAX_NESTING = 40

FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "sqrt": math.sqrt,
    "cbrt": math.cbrt,
    "abs": abs,
    "log": math.log10,
    "ln": math.log,
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
}

CONSTANTS: Dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
    "infinity": math.inf,
}

# Glyphs that show up in generated solutions or get pasted from them.
_GLYPHS = {
    "×": "*",
    "÷": "/",
    "−": "-",
    "∞": "infinity",
    "π": "pi",
}
_ROOT_OF_NUMBER_RE = re.compile(r"([√∛])\s*(\d+(?:\.\d+)?)")
_ROOT_NAMES = {"√": "sqrt", "∛": "cbrt"}

_TOKEN_RE = re.compile(
    r"\s*(?:(?P<num>\d+(?:\.\d*)?|\.\d+)|(?P<ident>[a-z]+)|(?P<op>[-+*/^()]))"
)

NUM, IDENT, OP = "num", "ident", "op"
Token = Tuple[str, str]


def normalize(expr: str) -> str:
    s = expr.strip().lower()
    for glyph, ascii_ in _GLYPHS.items():
        s = s.replace(glyph, ascii_)
    s = _ROOT_OF_NUMBER_RE.sub(lambda m: f"{_ROOT_NAMES[m.group(1)]}({m.group(2)})", s)
    for glyph, name in _ROOT_NAMES.items():
        s = s.replace(glyph, name)
    return s


def tokenize(expr: str) -> List[Token]:
    tokens: List[Token] = []
    pos = 0
    end = len(expr.rstrip())
    while pos < end:
        m = _TOKEN_RE.match(expr, pos)
        if m is None:
            raise InvalidExpressionError(f"unexpected character {expr[pos]!r} at {pos}")
        kind = m.lastgroup
        tokens.append((kind, m.group(kind)))
        pos = m.end()
    return tokens


def insert_implicit_multiplication(tokens: List[Token]) -> List[Token]:
    """2(3) -> 2*(3), 2pi -> 2*pi, (2)3 -> (2)*3."""
    out: List[Token] = []
    for tok in tokens:
        if out:
            prev = out[-1]
            if prev[0] == NUM and (tok == (OP, "(") or tok[0] == IDENT):
                out.append((OP, "*"))
            elif prev == (OP, ")") and tok[0] == NUM:
                out.append((OP, "*"))
        out.append(tok)
    return out


class _Parser:
    """Recursive-descent parser that evaluates as it goes."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    def peek(self) -> Optional[Token]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def consume(self, expected: Optional[Token] = None) -> Token:
        tok = self.peek()
        if tok is None:
            raise InvalidExpressionError("unexpected end of expression")
        if expected is not None and tok != expected:
            raise InvalidExpressionError(f"expected {expected[1]!r} but got {tok[1]!r}")
        self.pos += 1
        return tok

    def parse(self) -> float:
        value = self.expr()
        if self.peek() is not None:
            raise InvalidExpressionError(f"unexpected token {self.peek()[1]!r}")
        return value

    def expr(self) -> float:
        value = self.term()
        while self.peek() in ((OP, "+"), (OP, "-")):
            op = self.consume()[1]
            rhs = self.term()
            value = value + rhs if op == "+" else value - rhs
        return value

    def term(self) -> float:
        value = self.power()
        while self.peek() in ((OP, "*"), (OP, "/")):
            op = self.consume()[1]
            rhs = self.power()
            if op == "*":
                value = value * rhs
            else:
                if rhs == 0:
                    raise InvalidExpressionError("division by zero")
                value = value / rhs
        return value

    def power(self) -> float:
        base = self.unary()
        if self.peek() == (OP, "^"):
            self.consume()
            exponent = self.power()
            return math.pow(base, exponent)
        return base

    def unary(self) -> float:
        tok = self.peek()
        if tok == (OP, "-"):
            self.consume()
            return -self.unary()
        if tok == (OP, "+"):
            self.consume()
            return self.unary()
        return self.primary()

    def primary(self) -> float:
        kind, text = self.consume()
        if kind == NUM:
            return float(text)
        if kind == IDENT:
            if text in CONSTANTS:
                return CONSTANTS[text]
            if text in FUNCTIONS:
                return FUNCTIONS[text](self.group())
            raise InvalidExpressionError(f"unknown name {text!r}")
        if text == "(":
            self.pos -= 1
            return self.group()
        raise InvalidExpressionError(f"unexpected token {text!r}")

    def group(self) -> float:
        self.consume((OP, "("))
        self.depth += 1
        if self.depth > _MAX_NESTING:
            raise InvalidExpressionError("expression nested too deeply")
        value = self.expr()
        self.consume((OP, ")"))
        self.depth -= 1
        return value


def evaluate(expr: str) -> float:
    """
    Evaluate ``expr`` to a finite float.

    Raises InvalidExpressionError for anything outside the grammar, division
    by zero, domain/overflow errors and non-finite results.
    """
    if not isinstance(expr, str) or not expr.strip():
        raise InvalidExpressionError("empty expression")
    if len(expr) > MAX_EXPRESSION_LENGTH:
        raise InvalidExpressionError(f"expression longer than {MAX_EXPRESSION_LENGTH} characters")

    tokens = insert_implicit_multiplication(tokenize(normalize(expr)))
    try:
        value = _Parser(tokens).parse()
    except InvalidExpressionError:
        raise
    except (ValueError, OverflowError, ZeroDivisionError) as e:
        raise InvalidExpressionError(f"cannot evaluate: {e}") from e

    if not math.isfinite(value):
        raise InvalidExpressionError("expression is not finite")
    return value


def try_evaluate(expr: str) -> Optional[float]:
    try:
        return evaluate(expr)
    except InvalidExpressionError as e:
        logger.debug("could not evaluate %r: %s", expr, e)
        return None

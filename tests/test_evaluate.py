import math

import pytest
from fastapi.testclient import TestClient

from errors import InvalidExpressionError
from evaluator import MAX_EXPRESSION_LENGTH, evaluate, try_evaluate
from main import app

client = TestClient(app)


def test_health():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json().get("ok") is True


def test_evaluate_valid():
    r = client.post("/evaluate", json={"expr": "3^2 + 4^2"})
    assert r.status_code == 200
    data = r.json()
    assert data["ok"] is True
    assert abs(data["value"] - 25.0) < 1e-9


def test_evaluate_invalid_chars():
    r = client.post("/evaluate", json={"expr": "abc"})
    assert r.status_code == 200
    data = r.json()
    assert data["ok"] is False
    assert "unknown name" in data.get("feedback", "").lower()


def test_evaluate_len_limit():
    r = client.post("/evaluate", json={"expr": "1" * 101})
    data = r.json()
    assert data["ok"] is False


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("3^2 + 4^2", 25),
        ("7 - 3*2", 1),
        ("1/2 + 1/3", 5 / 6),
        ("2(3)", 6),
        ("(1+2)3", 9),
        ("2pi", 2 * math.pi),
        ("sqrt(144)", 12),
        ("√144", 12),
        ("∛27", 3),
        ("cbrt(-27)", -3),
        ("abs(-3.5)", 3.5),
        ("log(1000)", 3),
        ("ln(e)", 1),
        ("sin(0) + cos(0)", 1),
        ("−5 × 2", -10),
        ("10 ÷ 4", 2.5),
        ("π", math.pi),
        ("2^3^2", 512),
        ("2^-1", 0.5),
        ("5 × 10^-3", 0.005),
        ("-2^2", 4),
        ("--3", 3),
        (" 4.5 ", 4.5),
        (".5", 0.5),
        ("SQRT(16)", 4),
    ],
)
def test_evaluate_grammar(expr, expected):
    assert evaluate(expr) == pytest.approx(expected)


@pytest.mark.parametrize(
    "expr",
    [
        "",
        "   ",
        "1/0",
        "5/(2-2)",
        "process.exit()",
        "__import__('os').system('ls')",
        "2 +",
        "(1+2",
        "1+2)",
        "sqrt(-1)",
        "ln(0)",
        "infinity",
        "∞",
        "10^400",
        "x + 1",
        "1,5",
        "sqrt 4",
        "(-8)^(1/3)",
    ],
)
def test_evaluate_rejects(expr):
    with pytest.raises(InvalidExpressionError):
        evaluate(expr)


def test_evaluate_rejects_overlong_input():
    with pytest.raises(InvalidExpressionError):
        evaluate("1+" * (MAX_EXPRESSION_LENGTH // 2) + "1")


def test_evaluate_rejects_deep_nesting():
    with pytest.raises(InvalidExpressionError):
        evaluate("(" * 60 + "1" + ")" * 60)


def test_try_evaluate_returns_none_instead_of_raising():
    assert try_evaluate("1/0") is None
    assert try_evaluate("2+2") == 4

# tests/test_check.py
import random

from fastapi.testclient import TestClient

from main import app
from registry import generate_problem
from sampler import Sampler

client = TestClient(app)


def test_check_correct_numeric():
    r = client.post("/check", json={"answer": "25", "expected": 25})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True and body["correct"] is True


def test_check_incorrect_numeric():
    r = client.post("/check", json={"answer": "24", "expected": 25})
    body = r.json()
    assert body["ok"] is True and body["correct"] is False
    assert body["feedback"] == ""


def test_check_fraction_equivalent_decimal():
    r = client.post("/check", json={"answer": "3/4", "expected": 0.75})
    b = r.json()
    assert b["ok"] and b["correct"]
    assert b["feedback"] == "Correct; also written as 0.75 or 3/4."


def test_check_ratio():
    b = client.post("/check", json={"answer": "18:24", "expected": "3:4"}).json()
    assert b["ok"] and b["correct"]


def test_check_garbage_is_incorrect_not_error():
    b = client.post("/check", json={"answer": "process.exit()", "expected": 0}).json()
    assert b["ok"] is True and b["correct"] is False


def test_check_empty_answer():
    b = client.post("/check", json={"answer": "   ", "expected": 1}).json()
    assert b["ok"] is False and b["correct"] is False
    assert b["feedback"] == "Answer required."


def test_check_answer_too_long():
    b = client.post("/check", json={"answer": "1" * 101, "expected": 1}).json()
    assert b["ok"] is False


def test_check_generated_answer_round_trip():
    p = generate_problem(7, "ratios", Sampler(random.Random(3)))
    b = client.post("/check", json={"answer": str(p.answer), "expected": p.answer}).json()
    assert b["correct"] is True


def test_format():
    r = client.post("/format", json={"value": 0.5})
    assert r.status_code == 200
    assert r.json()["formatted"] == "0.5 or 1/2"
    assert client.post("/format", json={"value": 9}).json()["formatted"] == "9 or 3²"

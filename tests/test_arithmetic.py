import pytest

from rpncalc.runtime import (
    U32_MAX,
    ArithmeticOverflow,
    ArithmeticUnderflow,
    CalcRuntimeError,
    DivisionByZero,
    IncompleteExpression,
    NoNumberFoundForOperation,
    NoResultAvailable,
    calculate,
    evaluate,
)
from rpncalc.tokenizer import NumberToken, Operator, OperatorToken, SpaceToken, tokenize


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        *[pytest.param(str(d), d, id=f"digit-{d}") for d in range(10)],
        pytest.param("3 4 +", 7),
        pytest.param("5 1 -", 4),
        pytest.param("6 2 *", 12),
        pytest.param("8 2 /", 4),
        # operand order
        pytest.param("5 2 -", 3),
        pytest.param("9 3 /", 3),
        pytest.param("7 2 /", 3),
        pytest.param("2 7 /", 0),
        # alternate multiplication glyphs
        pytest.param("3 4 x", 12),
        pytest.param("3 4 X", 12),
        # no separators needed
        pytest.param("34+", 7),
        pytest.param("1 2 + 4 * 3 -", 9),
        pytest.param("5 1 2 + 4 * + 3 -", 14),
        pytest.param("3  4   +", 7),
        pytest.param("1 1 -", 0),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: int) -> None:
    tokens = tokenize(code)
    assert evaluate(tokens) == expected_ret_val


def test_evaluate_skips_space_tokens() -> None:
    tokens = [
        NumberToken(pos=0, value=2),
        SpaceToken(pos=1),
        NumberToken(pos=2, value=3),
        SpaceToken(pos=3),
        OperatorToken(pos=4, operator=Operator.MUL),
    ]
    assert evaluate(tokens) == 6


def test_evaluate_rejects_unknown_token() -> None:
    with pytest.raises(RuntimeError):
        evaluate(["1"])  # type: ignore


@pytest.mark.parametrize(
    "code, expected_error",
    [
        pytest.param("+", NoNumberFoundForOperation(pos=0, operator=Operator.ADD)),
        pytest.param("1 -", NoNumberFoundForOperation(pos=2, operator=Operator.SUB)),
        pytest.param("1 2 + x", NoNumberFoundForOperation(pos=6, operator=Operator.MUL)),
        pytest.param("/ 1 2", NoNumberFoundForOperation(pos=0, operator=Operator.DIV)),
        pytest.param("1 2 3 +", IncompleteExpression(stack_size=2)),
        pytest.param("1 2 3", IncompleteExpression(stack_size=3)),
        pytest.param("", NoResultAvailable()),
        pytest.param("  ", NoResultAvailable()),
        pytest.param("5 0 /", DivisionByZero(pos=4, operator=Operator.DIV, x=5, y=0)),
        pytest.param("0 1 -", ArithmeticUnderflow(pos=4, operator=Operator.SUB, x=0, y=1)),
    ],
)
def test_eval_errors(code: str, expected_error: CalcRuntimeError) -> None:
    with pytest.raises(CalcRuntimeError) as exc_info:
        calculate(code)
    assert exc_info.value == expected_error


def test_underflow_stops_at_first_operator() -> None:
    # the second operator would also fail, but the first one is reported
    with pytest.raises(NoNumberFoundForOperation) as exc_info:
        calculate("+ -")
    assert exc_info.value.pos == 0
    assert exc_info.value.operator is Operator.ADD


@pytest.mark.parametrize(
    "error, message",
    [
        pytest.param(
            NoNumberFoundForOperation(pos=0, operator=Operator.ADD),
            "No number found before the operation + at position 1",
        ),
        pytest.param(
            NoNumberFoundForOperation(pos=6, operator=Operator.MUL),
            "No number found before the operation * at position 7",
        ),
        pytest.param(IncompleteExpression(stack_size=2), "Incomplete expression. 1 tokens unprocessed."),
        pytest.param(IncompleteExpression(stack_size=5), "Incomplete expression. 4 tokens unprocessed."),
        pytest.param(NoResultAvailable(), "No result can be generated."),
        pytest.param(
            DivisionByZero(pos=4, operator=Operator.DIV, x=5, y=0),
            "Division by zero at position 5: 5 / 0",
        ),
        pytest.param(
            ArithmeticUnderflow(pos=4, operator=Operator.SUB, x=0, y=1),
            "Subtraction underflow at position 5: 0 - 1 is negative",
        ),
        pytest.param(
            ArithmeticOverflow(pos=3, operator=Operator.ADD, x=U32_MAX, y=1),
            f"Overflow at position 4: {U32_MAX} + 1 exceeds 4294967295",
        ),
    ],
)
def test_error_messages(error: CalcRuntimeError, message: str) -> None:
    assert str(error) == message


def test_alternate_glyph_reported_as_star() -> None:
    with pytest.raises(NoNumberFoundForOperation) as exc_info:
        calculate("X")
    assert str(exc_info.value) == "No number found before the operation * at position 1"


def test_multiplication_overflow() -> None:
    # 9^11 > 2^32 - 1 >= 9^10
    code = "9" + " 9 *" * 10
    with pytest.raises(ArithmeticOverflow) as exc_info:
        calculate(code)
    assert exc_info.value.operator is Operator.MUL
    assert exc_info.value.x == 9**10
    assert exc_info.value.y == 9
    assert exc_info.value.pos == len(code) - 1


def test_largest_value_fits() -> None:
    assert calculate("9" + " 9 *" * 9) == 9**10


@pytest.mark.parametrize("code", ["3 4 +", "1 2 3 +", "+", "", "5 0 /"])
def test_calculate_is_repeatable(code: str) -> None:
    def run() -> int | CalcRuntimeError:
        try:
            return calculate(code)
        except CalcRuntimeError as e:
            return e

    assert run() == run()

import random

from rpncalc.runtime import calculate
from rpncalc.utils import RpnError

ALPHABET = "0123456789+-*xX/ "


def eval_reference(code: str) -> int | None:
    stack: list[int] = []
    for char in code:
        if char.isdigit():
            stack.append(int(char))
        elif char == " ":
            continue
        else:
            if len(stack) < 2:
                return None
            y, x = stack.pop(), stack.pop()
            if char == "+":
                stack.append(x + y)
            elif char == "-":
                stack.append(x - y)
            elif char in "*xX":
                stack.append(x * y)
            elif y == 0:
                return None
            else:
                stack.append(x // y)
            if not 0 <= stack[-1] < 2**32:
                return None
    return stack[0] if len(stack) == 1 else None


def eval_my(code: str) -> int | str:
    try:
        return calculate(code)
    except RpnError as e:
        return str(e)


if __name__ == "__main__":

    def generate(length: int) -> str:
        return "".join(random.choices(ALPHABET, k=length))

    while True:
        code = generate(random.randint(1, 15))

        res_ref = eval_reference(code)
        res_my = eval_my(code)
        if res_my != eval_my(code):
            print(f"{code!r}\nnot idempotent: {res_my}\n\n")
        if res_ref is None and isinstance(res_my, str):
            continue
        if res_ref == res_my:
            continue
        print(f"{code!r}\nref: {res_ref}\nmy: {res_my}\n\n")

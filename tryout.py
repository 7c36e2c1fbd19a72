from rpncalc.runtime import CalcRuntimeError, evaluate
from rpncalc.tokenizer import TokenizerError, tokenize, untokenize

for code in [
    "5",
    "3 4 +",
    "5 2 -",
    "3 4 x",
    "9 3 /",
    "1 2 + 4 * 3 -",
    "+",
    "1 2 3 +",
    "",
    "3 4 $",
    "5 0 /",
    "0 1 -",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except TokenizerError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")
    print(f"canonical: {untokenize(tokens)!r}")

    try:
        result = evaluate(tokens)
    except CalcRuntimeError as e:
        print(e)
        continue
    print(f"result: {result}")

import json
import math

from scicalc.notation import to_dict, to_functional_notation
from scicalc.pipeline import SAMPLE_EXPRESSIONS, calculate
from scicalc.utils import CalculatorError

if __name__ == "__main__":
    passed = 0
    for code, expected in SAMPLE_EXPRESSIONS:
        print("=" * 10)
        print(f"code: {code!r}")
        try:
            calculation = calculate(code)
        except CalculatorError as e:
            print(e)
            continue

        print(f"tokens: {' '.join(str(t) for t in calculation.tokens)}")
        print(f"ast: {to_functional_notation(calculation.ast)}")
        print(f"tree: {json.dumps(to_dict(calculation.ast))}")
        ok = math.isclose(calculation.result, expected, rel_tol=1e-9, abs_tol=1e-6)
        passed += ok
        print(f"result: {calculation.result} (expected {expected}) {'PASSED' if ok else 'FAILED'}")

    print("=" * 10)
    print(f"{passed}/{len(SAMPLE_EXPRESSIONS)} passed")

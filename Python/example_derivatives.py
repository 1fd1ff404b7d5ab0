import sympy as sy

from generating import generate


def derivatives(expr, symbol):
    """expr and all of its nonzero derivatives with respect to symbol"""

    def differentiate(e):
        d = sy.diff(e, symbol)
        if d != 0:
            return d

    return generate(lambda: expr, differentiate)


if __name__ == "__main__":
    x = sy.symbols('x')

    for d in derivatives(x ** 4 - 3 * x ** 2 + 7, x):
        print(d)

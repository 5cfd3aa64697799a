"""
Convert a rotation from one representation into all of the others and print the results.

Usage examples::

    convert_rotation axis-angle 0 0 1 90 -u deg
    convert_rotation euler 0 pi/2 0 -u rad --euler-unit deg
    convert_rotation euler -pi/2 0 0 -u rad
    convert_rotation quaternion 0 0 0.7071 0.7071
    convert_rotation matrix 0 -1 0 1 0 0 0 0 1

Matrix values are read row by row unless ``--column-major`` is given.  Numeric arguments may be plain numbers or simple
arithmetic using ``pi`` and ``sqrt`` (for instance ``pi/2``, ``-pi``, ``2*pi/3``, ``sqrt(2)/2``).  Input angles are read
in degrees unless ``-u rad`` is given, independently of the units the results are reported in.
"""

import ast

import math

import operator

import sys

from argparse import ArgumentParser, ArgumentTypeError

from typing import Sequence

import numpy as np

from rotconv.equivalents import REPRESENTATIONS, EquivalentsOptions, EquivalentsSolver
from rotconv.formatting import DEFAULT_DIGITS


_BINARY_OPERATORS = {ast.Add: operator.add, ast.Sub: operator.sub, ast.Mult: operator.mul, ast.Div: operator.truediv,
                     ast.Pow: operator.pow}

_UNARY_OPERATORS = {ast.UAdd: operator.pos, ast.USub: operator.neg}

_CONSTANTS = {'pi': np.pi}

_FUNCTIONS = {'sqrt': math.sqrt}


def _evaluate(node: ast.AST) -> float:
    if isinstance(node, ast.Expression):
        return _evaluate(node.body)
    if isinstance(node, ast.Constant) and isinstance(node.value, (int, float)) and not isinstance(node.value, bool):
        return float(node.value)
    if isinstance(node, ast.Name) and node.id in _CONSTANTS:
        return _CONSTANTS[node.id]
    if isinstance(node, ast.BinOp) and type(node.op) in _BINARY_OPERATORS:
        value = _BINARY_OPERATORS[type(node.op)](_evaluate(node.left), _evaluate(node.right))
        # a negative base with a fractional exponent gives a complex number
        if isinstance(value, complex):
            raise ValueError('complex result')
        return value
    if (isinstance(node, ast.Call) and isinstance(node.func, ast.Name) and node.func.id in _FUNCTIONS
            and len(node.args) == 1 and not node.keywords):
        return _FUNCTIONS[node.func.id](_evaluate(node.args[0]))
    if isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY_OPERATORS:
        return _UNARY_OPERATORS[type(node.op)](_evaluate(node.operand))
    raise ValueError('unsupported expression')


def parse_number(text: str) -> float:
    """
    Parses a number or a simple arithmetic expression using ``pi``.

    Only numbers, ``pi``, ``sqrt(...)``, ``+``, ``-``, ``*``, ``/``, ``**`` and parentheses are allowed.

    :param text: the text to parse
    :return: the value
    :raises ArgumentTypeError: if the text cannot be parsed
    """

    try:
        return _evaluate(ast.parse(text.strip(), mode='eval'))
    except (SyntaxError, ValueError, ZeroDivisionError, OverflowError):
        raise ArgumentTypeError('Invalid input: {}'.format(text))


def _shield_negative_expressions(argv: Sequence[str]) -> list[str]:
    """
    Wraps values such as ``-pi/2`` in parentheses so argparse does not mistake them for options.

    Plain negative numbers are left alone since argparse already accepts them as values.
    """

    shielded = []
    for token in argv:
        if token.startswith('-') and not token.startswith('--') and not _is_plain_number(token):
            try:
                parse_number(token)
            except ArgumentTypeError:
                # an option such as -u
                shielded.append(token)
                continue
            token = '({})'.format(token)
        shielded.append(token)

    return shielded


def _is_plain_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def _get_parser() -> ArgumentParser:
    """
    Helper function for the argparse extension

    :return: A setup argument parser
    """

    parser = ArgumentParser(description='Convert a rotation into its equivalent axis-angle, Euler (Z-Y-X), '
                                        'quaternion, and rotation matrix representations')
    parser.add_argument('kind', choices=REPRESENTATIONS, help='The representation of the input values')
    parser.add_argument('values', nargs='+', type=parse_number,
                        help='The input values: x y z angle for axis-angle, alpha beta gamma for euler, '
                             'x y z w for quaternion, or 9 matrix elements')
    parser.add_argument('-u', '--unit', choices=('deg', 'rad'), default='deg',
                        help='The unit of the input angle(s) for axis-angle and euler inputs')
    parser.add_argument('--axis-angle-unit', choices=('deg', 'rad'), default='deg',
                        help='The unit to report the axis-angle angle in')
    parser.add_argument('--euler-unit', choices=('deg', 'rad'), default='deg',
                        help='The unit to report the euler angles in')
    parser.add_argument('-d', '--digits', type=int, default=DEFAULT_DIGITS,
                        help='The number of decimal places for non-angle values')
    parser.add_argument('-c', '--column-major', action='store_true',
                        help='Read the 9 matrix values column by column instead of row by row')

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Runs the command line tool.

    :param argv: the command line arguments (defaults to ``sys.argv[1:]``)
    :return: the exit status
    """

    if argv is None:
        argv = sys.argv[1:]

    args = _get_parser().parse_args(_shield_negative_expressions(argv))

    values = args.values
    if args.kind == 'matrix' and len(values) == 9 and not args.column_major:
        values = np.reshape(values, (3, 3))

    solver = EquivalentsSolver(EquivalentsOptions(input_unit=args.unit, axis_angle_unit=args.axis_angle_unit,
                                                  euler_unit=args.euler_unit, digits=args.digits))

    try:
        result = solver.solve(args.kind, values)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    formatted = result.format()

    print('axis-angle ({}):\t{}'.format(result.axis_angle_unit, formatted['axis-angle']))
    print('euler zyx ({}):\t{}'.format(result.euler_unit, formatted['euler']))
    print('quaternion:\t{}'.format(formatted['quaternion']))
    print('matrix:')
    print(formatted['matrix'])

    return 0


if __name__ == '__main__':
    sys.exit(main())

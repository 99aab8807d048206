from fractions import Fraction

import pytest

from dsakit.evaluator import Evaluator, build_tree, evaluate, tokenize
from dsakit.exprtree import ExprTreeNode, NodeType
from dsakit.rational import UnlimitedRational
from dsakit.symtable import SymbolTable

_SYMBOLS = {NodeType.ADD: "+", NodeType.SUB: "-", NodeType.MUL: "*", NodeType.DIV: "/"}
_OPS = {
    NodeType.ADD: UnlimitedRational.add,
    NodeType.SUB: UnlimitedRational.sub,
    NodeType.MUL: UnlimitedRational.mul,
    NodeType.DIV: UnlimitedRational.div,
}


def _flatten(node):
    if node.kind is NodeType.VAR:
        return [node.name]
    if node.kind is NodeType.VAL:
        return [str(node.value.p)]
    return ["(", *_flatten(node.left), _SYMBOLS[node.kind], *_flatten(node.right), ")"]


def _operator_nodes(node):
    if node.kind in _OPS:
        yield node
        yield from _operator_nodes(node.left)
        yield from _operator_nodes(node.right)


def _frac_str(value):
    return f"{value.numerator}/{value.denominator}"


def _run(evaluator, line):
    evaluator.parse(tokenize(line))
    return evaluator.eval()


def test_tokenize_statement():
    assert tokenize("x := (a + 12)") == ["x", ":=", "(", "a", "+", "12", ")"]


def test_tokenize_ignores_spacing():
    assert tokenize("v_1:=(y*3)") == tokenize("v_1 := ( y * 3 )")


def test_build_tree_single_operand():
    node = build_tree(["alpha"])
    assert node.kind is NodeType.VAR
    assert node.name == "alpha"


@pytest.mark.parametrize(
    "expression",
    [
        "7",
        "(a + b)",
        "((a * 4) - (b / 2))",
        "(x / ((y + 1) * (z - 3)))",
    ],
)
def test_build_tree_round_trip(expression):
    tokens = tokenize(expression)
    assert _flatten(build_tree(tokens)) == tokens


@pytest.mark.parametrize(
    "tokens",
    [
        [],
        ["(", "a", "+"],
        ["(", "a", "b", ")"],
        ["a", "b"],
        ["(", "a", "+", "b"],
        ["(", "a", "+", "b", "c"],
        ["+"],
        [")"],
        [":="],
    ],
)
def test_build_tree_rejects_malformed(tokens):
    with pytest.raises(ValueError):
        build_tree(tokens)


def test_evaluate_value_leaf_records_result():
    node = ExprTreeNode.from_token("9")
    result = evaluate(node, SymbolTable())
    assert result == UnlimitedRational(9)
    assert node.evaluated_value == result


def test_evaluate_assignment_node_is_none():
    assert evaluate(ExprTreeNode.from_token(":="), SymbolTable()) is None


def test_evaluate_unknown_variable_raises():
    with pytest.raises(KeyError):
        evaluate(build_tree(["(", "q", "+", "1", ")"]), SymbolTable())


def test_statements_bind_variables():
    evaluator = Evaluator()
    _run(evaluator, "a := 3")
    value = _run(evaluator, "b := ((a * 4) - (a / 2))")
    expected = Fraction(3) * 4 - Fraction(3, 2)
    assert str(value) == _frac_str(expected)
    assert evaluator.symtable.search("b") == value
    assert len(evaluator.symtable) == 2
    assert len(evaluator.expr_trees) == 2


def test_every_operator_node_holds_its_value():
    evaluator = Evaluator()
    _run(evaluator, "a := 5")
    _run(evaluator, "c := ((a + 7) / (2 * (a - 1)))")
    root = evaluator.expr_trees[-1]
    nodes = list(_operator_nodes(root.right))
    assert len(nodes) == 4
    for node in nodes:
        combined = _OPS[node.kind](node.left.evaluated_value, node.right.evaluated_value)
        assert node.evaluated_value == combined
    assert root.evaluated_value == root.right.evaluated_value
    assert str(root.evaluated_value) == _frac_str(Fraction(5 + 7, 2 * (5 - 1)))


def test_parse_requires_assignment():
    with pytest.raises(ValueError):
        Evaluator().parse(["x", "+", "1"])


def test_parse_rejects_non_variable_target():
    with pytest.raises(ValueError):
        Evaluator().parse(["3", ":=", "4"])


def test_eval_before_parse_raises():
    with pytest.raises(IndexError):
        Evaluator().eval()


def test_undefined_variable_raises():
    evaluator = Evaluator()
    evaluator.parse(tokenize("x := (y + 1)"))
    with pytest.raises(KeyError):
        evaluator.eval()
    assert len(evaluator.symtable) == 0


def test_division_by_zero_raises():
    evaluator = Evaluator()
    evaluator.parse(tokenize("x := (4 / 0)"))
    with pytest.raises(ZeroDivisionError):
        evaluator.eval()
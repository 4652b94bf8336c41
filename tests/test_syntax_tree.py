from movacc.syntax_tree import ASTNode, NodeOp, make_leaf, make_node, make_unary


def test_leaf_has_no_children():
    leaf = make_leaf(NodeOp.INTLIT, 42)
    assert leaf.left is None
    assert leaf.right is None
    assert leaf.value == 42
    assert leaf.op is NodeOp.INTLIT


def test_unary_has_only_left_child():
    child = make_leaf(NodeOp.INTLIT, 1)
    node = make_unary(NodeOp.LVIDENTIFIER, child, 3)
    assert node.left is child
    assert node.right is None
    assert node.value == 3


def test_node_holds_both_children():
    left = make_leaf(NodeOp.INTLIT, 2)
    right = make_leaf(NodeOp.INTLIT, 5)
    node = make_node(NodeOp.ADD, left, right, 0)
    assert node == ASTNode(NodeOp.ADD, left, right, 0)
    assert node.left.value == 2
    assert node.right.value == 5
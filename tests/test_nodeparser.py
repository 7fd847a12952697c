import xml.etree.ElementTree as ET

import pytest

from ofxkit.nodeparser import NodeList

DOCUMENT = (
    "<OFX>"
    "<SIGNONMSGSRSV1><SONRS><STATUS><CODE>0</CODE><SEVERITY>INFO</SEVERITY>"
    "</STATUS></SONRS></SIGNONMSGSRSV1>"
    "<BANKMSGSRSV1>"
    "<STMTTRNRS><TRNUID>1001</TRNUID><ACCTID>ACCT-A</ACCTID></STMTTRNRS>"
    "<STMTTRNRS><TRNUID>1002</TRNUID><ACCTID>ACCT-B</ACCTID></STMTTRNRS>"
    "<STMTTRNRS><TRNUID>1003</TRNUID><ACCTID>ACCT-A</ACCTID></STMTTRNRS>"
    "</BANKMSGSRSV1>"
    "</OFX>"
)


@pytest.fixture
def doc():
    return NodeList.from_string(DOCUMENT)


def test_from_string_holds_root(doc):
    assert len(doc) == 1
    assert doc[0].tag == "OFX"


def test_from_root_accepts_element_tree():
    tree = ET.ElementTree(ET.fromstring(DOCUMENT))
    nodes = NodeList.from_root(tree)
    assert [node.tag for node in nodes] == ["OFX"]


def test_path_reaches_nested_element(doc):
    codes = doc.path("SIGNONMSGSRSV1/SONRS/STATUS/CODE")
    assert codes.text() == ["0"]


def test_path_collects_all_matches_in_order(doc):
    ids = doc.path("BANKMSGSRSV1/STMTTRNRS/TRNUID").text()
    assert ids == ["1001", "1002", "1003"]


def test_path_result_is_node_list(doc):
    step = doc.path("BANKMSGSRSV1")
    assert isinstance(step, NodeList)
    assert step.path("STMTTRNRS/ACCTID").text() == doc.path("BANKMSGSRSV1/STMTTRNRS/ACCTID").text()


def test_path_missing_gives_empty(doc):
    assert doc.path("NOPE/CODE") == []
    assert doc.path("").text() == [""]


def test_text_of_empty_list_is_single_empty_string():
    assert NodeList().text() == [""]


def test_text_of_element_without_text():
    nodes = NodeList.from_string("<A><B/></A>")
    assert nodes.path("B").text() == [""]


def test_text_includes_mixed_content():
    nodes = NodeList.from_string("<A>one<B/>two</A>")
    assert nodes.text() == ["one", "two"]


def test_select_filters_by_child_value(doc):
    statements = doc.path("BANKMSGSRSV1/STMTTRNRS")
    chosen = statements.select("ACCTID", "ACCT-A")
    assert chosen.path("TRNUID").text() == ["1001", "1003"]


def test_select_no_match(doc):
    statements = doc.path("BANKMSGSRSV1/STMTTRNRS")
    assert statements.select("ACCTID", "ACCT-Z") == []
    assert statements.select("MISSING", "ACCT-A") == []


def test_select_ignores_element_first_child():
    nodes = NodeList.from_string("<A><K><X>v</X></K></A>")
    assert nodes.select("K", "v") == []


def test_select_repeats_parent_for_each_match():
    nodes = NodeList.from_string("<A><K>v</K><K>v</K></A>")
    selected = nodes.select("K", "v")
    assert len(selected) == 2
    assert all(node is nodes[0] for node in selected)


def test_namespaced_names_match_local_name():
    nodes = NodeList.from_string('<r xmlns="urn:example"><item>x</item></r>')
    assert nodes.path("item").text() == ["x"]


def test_invalid_document_raises():
    with pytest.raises(ET.ParseError):
        NodeList.from_string("<OFX><open></OFX>")
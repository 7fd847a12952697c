# ofxkit

Building blocks for programs that speak Open Financial Exchange (OFX):

- **`ofxkit.aggregate`** – `Aggregate` composes an OFX aggregate: a tag
  wrapping subordinate elements and nested aggregates, rendered with the
  `\r\n` line endings OFX servers expect.
- **`ofxkit.treenode`** – `TreeNode`, a node of an ordered n-ary tree with
  its data, parent and children, and helpers such as `child`, `index`,
  `depth`, `next_sibling`, `previous_sibling` and `siblings`.
- **`ofxkit.traversal`** – generic walks over nodes: `pre_order`,
  `post_order`, `fixed_depth` and `next_at_same_depth`.
- **`ofxkit.tree`** – `Tree`, an ordered forest of `TreeNode` objects with
  structural editing: `append_child`, `append_subtree`, `insert`,
  `insert_after`, `insert_subtree`, `replace`, `replace_subtree`, `erase`,
  `erase_children`, `flatten`, `reparent`, `move_after`, `move_before`,
  `move_ontop`, `swap`, plus `copy`, `is_in_subtree` and `depth`.
- **`ofxkit.nodeparser`** – `NodeList`, a small path-style query helper for
  XML documents: follow `A/B/C` paths, select nodes whose child has a given
  text, and collect text content.

The package has no third-party dependencies and supports Python 3.10 and later.

## Composing an aggregate

```python
from ofxkit.aggregate import Aggregate

acct = Aggregate("CCACCTFROM")
acct.add("ACCTID", "EXAMPLE")

info = Aggregate("CCACCTINFO")
info.add_aggregate(acct)
info.add("SUPTXDL", "Y")
info.add("SVCSTATUS", "ACTIVE")

print(info.output())
```

Output (each line ends in `\r\n`):

```
<CCACCTINFO>
<CCACCTFROM>
<ACCTID>EXAMPLE
</CCACCTFROM>
<SUPTXDL>Y
<SVCSTATUS>ACTIVE
</CCACCTINFO>
```

`add_xml` writes an element with a closing tag (`<TAG>data</TAG>`), as used
in the XML flavour of OFX. `add`, `add_xml` and `add_aggregate` return the
aggregate itself, so calls can be chained; `str(aggregate)` is the same as
`aggregate.output()`.

## Working with trees

```python
from ofxkit.tree import Tree

tree = Tree("OFX")
root = tree.roots()[0]
signon = tree.append_child(root, "SIGNONMSGSRQV1")
tree.append_child(signon, "SONRQ")
tree.append_child(root, "BANKMSGSRQV1")

print([node.data for node in tree])               # pre-order
print([node.data for node in tree.post_order()])
print(len(tree), tree.depth(signon))              # 4 1
print([node.data for node in tree.fixed_depth(1)])
```

Nodes are addressed by the `TreeNode` objects themselves. Operations raise
`ValueError` for a node that belongs to another tree or for a move that would
place a node below itself; `fixed_depth` raises `IndexError` when no node
lies that deep.

## Querying XML responses

```python
from ofxkit.nodeparser import NodeList

doc = NodeList.from_string(
    "<OFX><ACCTINFO><DESC>Checking</DESC></ACCTINFO>"
    "<ACCTINFO><DESC>Savings</DESC></ACCTINFO></OFX>"
)
print(doc.path("ACCTINFO/DESC").text())                    # ['Checking', 'Savings']
print(len(doc.path("ACCTINFO").select("DESC", "Savings")))  # 1
```

`text()` returns `['']` when no text is found.

## What the package does not do

ofxkit offers no command-line tool and no argument parsing. It does not
build complete statement, account-information or payment requests, does not
send anything to an OFX server, and does not parse OFX statement files. It
also has no whole-tree algorithms such as merging, sorting or comparing
trees; only the editing and traversal operations listed above.

## Running the tests

Install the `test` extra and run pytest from the project directory.
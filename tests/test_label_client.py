from urllib.parse import quote

import pytest

from common.exceptions import InvalidArgumentError, MalformedResponseError, TransportFailure
from common.models.entities import Label, Node
from common.models.row import Row
from core.transport.base import TransportResponse


def _ok(data=None, code=200):
    return TransportResponse(code=code, data=data)


def test_make_label_returns_label(client):
    label_a = client.make_label("FOOBAR")
    label_b = client.make_label("BAZQUX")

    assert isinstance(label_a, Label) and label_a.name == "FOOBAR"
    assert isinstance(label_b, Label) and label_b.name == "BAZQUX"
    assert label_a is not label_b


def test_make_label_same_name_returns_same_instance(client):
    assert client.make_label("FOOBAR") is client.make_label("FOOBAR")


@pytest.mark.parametrize("name", ["", None])
def test_make_label_empty_name_raises(client, name):
    with pytest.raises(InvalidArgumentError):
        client.make_label(name)


def test_get_nodes_for_label_returns_row(client, transport):
    label = Label(client, "FOOBAR")
    transport.get.return_value = _ok([
        {"self": "http://localhost:7474/db/data/relationship/56", "data": {}},
        {"self": "http://localhost:7474/db/data/relationship/834", "data": {}},
    ])

    nodes = client.get_nodes_for_label(label)

    transport.get.assert_called_once_with("/label/FOOBAR/nodes")
    assert isinstance(nodes, Row)
    assert len(nodes) == 2
    assert all(isinstance(n, Node) for n in nodes)
    assert [nodes[0].id, nodes[1].id] == [56, 834]
    assert nodes[0].client is client


def test_get_nodes_for_label_with_property_returns_row(client, transport):
    label = Label(client, "FOOBAR")
    transport.get.return_value = _ok([
        {"self": "http://localhost:7474/db/data/relationship/56", "data": {"baz": "qux"}},
    ])

    nodes = client.get_nodes_for_label(label, "baz", "qux")

    transport.get.assert_called_once_with("/label/FOOBAR/nodes?baz=%22qux%22")
    assert len(nodes) == 1
    assert nodes[0].id == 56
    assert nodes[0].properties == {"baz": "qux"}


def test_get_nodes_for_label_no_nodes_returns_empty_row(client, transport):
    transport.get.return_value = _ok([])

    nodes = client.get_nodes_for_label(Label(client, "FOOBAR"))

    transport.get.assert_called_once_with("/label/FOOBAR/nodes")
    assert isinstance(nodes, Row)
    assert len(nodes) == 0


def test_get_nodes_for_label_url_encodes_path(client, transport):
    label_name = "FOO+Bar /Baz"
    property_name = 'ba$! "z qux"'
    property_value = 'f @oo !B"/+%20ar '
    transport.get.return_value = _ok([])

    client.get_nodes_for_label(Label(client, label_name), property_name, property_value)

    expected = "/label/{}/nodes?{}={}".format(
        quote(label_name, safe=""),
        quote(property_name, safe=""),
        quote('"' + property_value + '"', safe=""),
    )
    transport.get.assert_called_once_with(expected)
    assert expected == (
        "/label/FOO%2BBar%20%2FBaz/nodes"
        "?ba%24%21%20%22z%20qux%22=%22f%20%40oo%20%21B%22%2F%2B%2520ar%20%22"
    )


@pytest.mark.parametrize("prop, value", [("prop", None), (None, "val")])
def test_get_nodes_for_label_unpaired_property_raises(client, transport, prop, value):
    with pytest.raises(InvalidArgumentError):
        client.get_nodes_for_label(Label(client, "FOOBAR"), prop, value)
    transport.get.assert_not_called()


def test_get_nodes_for_label_requires_label(client, transport):
    with pytest.raises(InvalidArgumentError):
        client.get_nodes_for_label("FOOBAR")
    transport.get.assert_not_called()


def test_get_nodes_for_label_error_status_raises(client, transport):
    transport.get.return_value = _ok({"message": "boom"}, code=500)

    with pytest.raises(TransportFailure) as info:
        client.get_nodes_for_label(Label(client, "FOOBAR"))

    assert info.value.code == 500
    assert info.value.path == "/label/FOOBAR/nodes"
    assert info.value.data == {"message": "boom"}


def test_get_nodes_for_label_transport_error_propagates(client, transport):
    transport.get.side_effect = TransportFailure("connection refused")

    with pytest.raises(TransportFailure):
        client.get_nodes_for_label(Label(client, "FOOBAR"))


@pytest.mark.parametrize("body", [
    [{"data": {}}],
    [{"self": "http://localhost:7474/db/data/node/abc", "data": {}}],
    [{"self": "http://localhost:7474/db/data/node/12"}],
    {"self": "http://localhost:7474/db/data/node/12", "data": {}},
])
def test_get_nodes_for_label_malformed_body_raises(client, transport, body):
    transport.get.return_value = _ok(body)

    with pytest.raises(MalformedResponseError):
        client.get_nodes_for_label(Label(client, "FOOBAR"))


def test_label_get_nodes_routes_through_client(client, transport):
    transport.get.return_value = _ok([{"self": "http://localhost:7474/db/data/node/7", "data": {"name": "x"}}])
    label = client.make_label("Person")

    nodes = label.get_nodes("name", "x")

    transport.get.assert_called_once_with("/label/Person/nodes?name=%22x%22")
    assert nodes[0].id == 7


def test_get_labels_no_node_returns_server_labels(client, transport):
    already = client.make_label("BAZQUX")
    return_data = ["FOOBAR", already.name, "LOREMIPSUM"]
    transport.get.return_value = _ok(return_data)

    labels = client.get_labels()

    transport.get.assert_called_once_with("/labels")
    assert len(labels) == len(return_data)
    for name, label in zip(return_data, labels):
        assert isinstance(label, Label)
        assert label.name == name
    assert labels[1] is already


def test_get_labels_node_specified_returns_node_labels(client, transport):
    node = Node(client)
    node.id = 123
    transport.get.return_value = _ok(["FOOBAR", "BAZQUX"])

    labels = client.get_labels(node)

    transport.get.assert_called_once_with("/node/123/labels")
    assert [label.name for label in labels] == ["FOOBAR", "BAZQUX"]


def test_get_labels_same_name_across_responses_is_same_object(client, transport):
    transport.get.return_value = _ok(["FOOBAR"])
    first = client.get_labels()
    transport.get.return_value = _ok(["BAZQUX", "FOOBAR"])
    second = client.get_labels()

    assert first[0] is second[1]
    assert first[0] is client.make_label("FOOBAR")


def test_get_labels_keeps_duplicates_in_server_order(client, transport):
    transport.get.return_value = _ok(["A", "B", "A"])

    labels = client.get_labels()

    assert [label.name for label in labels] == ["A", "B", "A"]
    assert labels[0] is labels[2]


def test_get_labels_no_node_id_raises(client, transport):
    with pytest.raises(InvalidArgumentError):
        client.get_labels(Node(client))
    transport.get.assert_not_called()


def test_node_get_labels_routes_through_client(client, transport):
    transport.get.return_value = _ok(["FOOBAR"])
    node = Node(client, id=0)

    labels = node.get_labels()

    transport.get.assert_called_once_with("/node/0/labels")
    assert labels == [client.make_label("FOOBAR")]


def test_get_labels_error_status_registers_nothing(client, transport):
    transport.get.return_value = _ok(["FOOBAR"], code=404)

    with pytest.raises(TransportFailure):
        client.get_labels()

    assert "FOOBAR" not in client._registry


def test_get_labels_malformed_body_registers_nothing(client, transport):
    transport.get.return_value = _ok(["FOOBAR", 42])

    with pytest.raises(MalformedResponseError):
        client.get_labels()

    assert "FOOBAR" not in client._registry


def test_add_labels_posts_names(client, transport):
    transport.post.return_value = _ok(None, code=204)
    node = Node(client, id=5)
    labels = [client.make_label("FOO BAR"), client.make_label("BAZ")]

    added = client.add_labels(node, labels)

    transport.post.assert_called_once_with("/node/5/labels", ["FOO BAR", "BAZ"])
    assert added == labels


@pytest.mark.parametrize("labels", [[], ["FOOBAR"], None])
def test_add_labels_invalid_labels_raise(client, transport, labels):
    with pytest.raises(InvalidArgumentError):
        client.add_labels(Node(client, id=5), labels)
    transport.post.assert_not_called()


def test_add_labels_no_node_id_raises(client, transport):
    with pytest.raises(InvalidArgumentError):
        client.add_labels(Node(client), [client.make_label("FOOBAR")])
    transport.post.assert_not_called()


def test_remove_label_deletes_encoded_name(client, transport):
    transport.delete.return_value = _ok(None, code=204)
    label = client.make_label("FOO /Bar")

    removed = client.remove_label(Node(client, id=9), label)

    transport.delete.assert_called_once_with("/node/9/labels/FOO%20%2FBar")
    assert removed is label


def test_remove_label_no_node_id_raises(client, transport):
    with pytest.raises(InvalidArgumentError):
        client.remove_label(Node(client), client.make_label("FOOBAR"))
    transport.delete.assert_not_called()


def test_remove_label_error_status_raises(client, transport):
    transport.delete.return_value = _ok({"message": "not found"}, code=404)

    with pytest.raises(TransportFailure) as info:
        client.remove_label(Node(client, id=9), client.make_label("FOOBAR"))
    assert info.value.code == 404


def test_get_nodes_for_label_empty_property_name_raises(client, transport):
    with pytest.raises(InvalidArgumentError):
        client.get_nodes_for_label(Label(client, "FOOBAR"), "", "val")
    transport.get.assert_not_called()

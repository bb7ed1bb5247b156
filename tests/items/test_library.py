import pytest

from itemviewer.items.library import ItemLibrary, ItemLoadError


@pytest.fixture
def library(items_xml) -> ItemLibrary:
    lib = ItemLibrary()
    lib.load(items_xml)
    return lib


@pytest.mark.unit
def test_load_counts_usable_items(items_xml):
    lib = ItemLibrary()

    assert lib.is_loaded is False
    assert lib.load(items_xml) == 2
    assert lib.is_loaded is True
    assert lib.total_count == 3
    assert lib.source_path == items_xml


@pytest.mark.unit
def test_placeholders_hidden_from_browse(library):
    assert [item.id for item in library.usable_items] == ["16535", "86"]
    assert library.visible_items == library.usable_items
    assert all(item.name != "." for item in library.visible_items)


@pytest.mark.unit
@pytest.mark.parametrize(
    "query, expected",
    [
        ("sword", ["16535"]),
        ("SWORD", ["16535"]),
        ("  tree ", ["86"]),
        ("86", ["86"]),
        ("165", ["16535"]),
        ("nothing-matches", []),
    ],
)
def test_search_by_id_or_name(library, query, expected):
    results = library.search(query)
    assert [item.id for item in results] == expected
    assert library.visible_items == results


@pytest.mark.unit
def test_search_never_returns_placeholders(library):
    # "." would match the placeholder's name and "0" its id
    assert library.search(".") == ()
    assert all(item.name != "." for item in library.search("0"))


@pytest.mark.unit
def test_empty_search_resets(library):
    library.search("sword")
    assert library.search("   ") == library.usable_items

    library.search("sword")
    assert library.clear_search() == library.usable_items


@pytest.mark.unit
def test_find_by_id(library):
    assert library.find("86").name == "san d'orian holiday tree"
    assert library.find("0") is None
    assert library.find("999") is None


@pytest.mark.unit
def test_missing_file_leaves_collection(library, tmp_path):
    before = library.all_items

    with pytest.raises(ItemLoadError, match="was not found"):
        library.load(tmp_path / "nope.xml")

    assert library.all_items == before
    assert library.is_loaded is True


@pytest.mark.unit
def test_malformed_file_clears_collection(library, tmp_path):
    broken = tmp_path / "broken.xml"
    broken.write_text("<export><thing type='Item'>")

    with pytest.raises(ItemLoadError, match="Error loading or parsing XML file"):
        library.load(broken)

    assert library.all_items == ()
    assert library.visible_items == ()
    assert library.is_loaded is False


@pytest.mark.unit
def test_reload_replaces_collection(library, make_items_xml):
    other = make_items_xml([{"id": "1", "name": "Ore"}], filename="other.xml")

    assert library.load(other) == 1
    assert [item.id for item in library.visible_items] == ["1"]
    assert library.total_count == 1

# meowmatch/api/cats/test_filters.py
import pytest
from werkzeug.datastructures import MultiDict

from meowmatch.models.cat import Cat
from .filters import CatFilters, filter_cats, is_unconstrained


def make_cat(cat_id, age="adult", color="gray", size="medium", gender="male", personality=(), good_with=()):
    return Cat.from_dict({
        'cat_id': cat_id, 'name': f"Cat {cat_id}", 'age': age, 'color': color, 'size': size,
        'gender': gender, 'personality': list(personality), 'good_with': list(good_with),
        'description': "A lovely test cat.", 'image_url': "https://example.com/cat.jpg"
    })


@pytest.fixture
def cats():
    return [
        make_cat("1", age="kitten", color="orange", size="small", personality=["playful"], good_with=["children"]),
        make_cat("2", age="kitten", color="black", size="small", gender="female", personality=["calm", "affectionate"]),
        make_cat("3", age="adult", color="gray", size="large", personality=["calm"], good_with=["dogs", "children"]),
        make_cat("4", age="senior", color="white", gender="female", personality=["independent"]),
        make_cat("5", age="kitten", color="tabby", personality=["calm"], good_with=["other-cats"]),
    ]


def test_no_constraints_returns_input_unchanged(cats):
    assert filter_cats(cats, CatFilters()) == cats


def test_result_is_ordered_subsequence(cats):
    result = filter_cats(cats, CatFilters(personality="calm"))
    assert [c.cat_id for c in result] == ["2", "3", "5"]
    positions = [cats.index(c) for c in result]
    assert positions == sorted(positions)


def test_kitten_and_calm_are_combined_with_and(cats):
    result = filter_cats(cats, CatFilters(age="kitten", personality="calm"))
    assert [c.cat_id for c in result] == ["2", "5"]


def test_kitten_playful_and_adult_calm():
    pair = [make_cat("1", age="kitten", personality=["playful"]), make_cat("2", age="adult", personality=["calm"])]
    assert [c.cat_id for c in filter_cats(pair, CatFilters(age="kitten"))] == ["1"]
    assert [c.cat_id for c in filter_cats(pair, CatFilters(personality="calm"))] == ["2"]
    assert filter_cats(pair, CatFilters(age="kitten", personality="calm")) == []


def test_membership_dimensions_check_tags(cats):
    result = filter_cats(cats, CatFilters(good_with="children"))
    assert [c.cat_id for c in result] == ["1", "3"]


def test_equality_dimensions(cats):
    assert [c.cat_id for c in filter_cats(cats, CatFilters(gender="female", age="senior"))] == ["4"]
    assert filter_cats(cats, CatFilters(color="calico")) == []


def test_favorites_only_restricts_to_saved_ids(cats):
    result = filter_cats(cats, CatFilters(favorites_only=True), favorites={"2"})
    assert [c.cat_id for c in result] == ["2"]


def test_favorites_only_with_empty_favorites_is_empty(cats):
    assert filter_cats(cats, CatFilters(favorites_only=True), favorites=set()) == []
    assert filter_cats(cats, CatFilters(favorites_only=True)) == []


def test_favorites_ignored_when_toggle_off(cats):
    assert filter_cats(cats, CatFilters(), favorites={"2"}) == cats


def test_reset_clears_every_dimension_and_toggle():
    filters = CatFilters(age="kitten", color="black", personality="calm", favorites_only=True)
    assert filters.reset() == CatFilters()
    assert filters.reset().active() == {}
    assert filters.reset().favorites_only is False


def test_with_value_replaces_single_dimension():
    filters = CatFilters(age="kitten").with_value("color", "black")
    assert filters.active() == {"age": "kitten", "color": "black"}
    assert filters.with_value("age", "all").active() == {"color": "black"}
    with pytest.raises(KeyError):
        filters.with_value("breed", "persian")


def test_from_args_accepts_all_sentinel_and_aliases():
    args = MultiDict({"age": "kitten", "color": "all", "goodWith": "dogs", "favorites_only": "true"})
    filters = CatFilters.from_args(args)
    assert filters.active() == {"age": "kitten", "good_with": "dogs"}
    assert filters.favorites_only is True
    assert CatFilters.from_args(MultiDict()) == CatFilters()


def test_is_unconstrained():
    assert is_unconstrained(None)
    assert is_unconstrained("")
    assert is_unconstrained("All")
    assert not is_unconstrained("kitten")

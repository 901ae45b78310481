"""Unit tests for reql_codec.term."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from reql_codec import Term, TermType, UnsupportedTypeError, db, expr, row, table


class TestBuild:
    def test_datum(self):
        assert expr(5).to_datum() == 5
        assert expr("x").to_datum() == "x"
        assert expr(None).to_datum() is None

    def test_datum_time(self):
        moment = datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert expr(moment).to_datum() == {"$reql_type$": "TIME", "epoch_time": 0.0, "timezone": "+00:00"}

    def test_make_array(self):
        assert expr([1, 2]).to_datum() == [2, [1, 2]]

    def test_make_obj(self):
        assert expr({"a": 1, "b": [1]}).to_datum() == {"a": 1, "b": [2, [1]]}

    def test_make_obj_rejects_non_str_keys(self):
        with pytest.raises(UnsupportedTypeError):
            expr({1: "a"})

    def test_nested_object_with_non_str_keys_fails_in_chain(self):
        with pytest.raises(UnsupportedTypeError):
            table("users").insert({"name": "ada", "meta": {2: "b"}}).to_datum()

    def test_chain(self):
        assert db("test").table("users").get(1).to_datum() == [16, [[15, [[14, ["test"]], "users"]], 1]]

    def test_optargs(self):
        assert table("users", read_mode="outdated").to_datum() == [15, ["users"], {"read_mode": "outdated"}]

    def test_top_level_table(self):
        assert table("users").to_datum() == [15, ["users"]]

    def test_insert_document(self):
        assert table("users").insert({"name": "ada"}).to_datum() == [56, [[15, ["users"]], {"name": "ada"}]]

    def test_get_all_with_index(self):
        assert table("users").get_all("a", "b", index="email").to_datum() == [
            78,
            [[15, ["users"]], "a", "b"],
            {"index": "email"},
        ]

    def test_func(self):
        term = table("users").filter(lambda user: user.get_field("age").gt(18))
        datum = term.to_datum()
        assert datum[0] == TermType.FILTER
        func = datum[1][1]
        assert func[0] == TermType.FUNC
        var_ids = func[1][0]
        assert var_ids[0] == TermType.MAKE_ARRAY
        (var_id,) = var_ids[1]
        assert func[1][1] == [21, [[31, [[10, [var_id]], "age"]], 18]]

    def test_func_keeps_callable(self):
        predicate = lambda user: user.eq(1)  # noqa: E731
        func = expr(predicate)
        assert func.term_type == TermType.FUNC
        assert func.data is predicate

    def test_implicit_var_is_wrapped(self):
        datum = table("users").filter(row.get_field("age").eq(3)).to_datum()
        assert datum[1][1] == [69, [[2, [1]], [17, [[31, [[13, []], "age"]], 3]]]]

    def test_plain_filter_value_is_not_wrapped(self):
        assert table("users").filter({"age": 3}).to_datum() == [39, [[15, ["users"]], {"age": 3}]]


class TestChaining:
    def test_root_term(self):
        root = db("test")
        term = root.table("users").get(1)
        assert term.root_term is root
        assert root.root_term is None

    def test_args_keep_previous_term(self):
        base = db("test")
        term = base.table("users")
        assert term.args[0] is base
        assert isinstance(term, Term)


class TestStr:
    def test_chain(self):
        assert str(db("test").table("users").get(1)) == "r.db('test').table('users').get(1)"

    def test_optargs(self):
        assert str(table("users", read_mode="outdated")) == "r.table('users', read_mode='outdated')"

    def test_row(self):
        assert str(row.get_field("age")) == "r.row.get_field('age')"

    def test_func(self):
        rendered = str(expr(lambda doc: doc.eq(1)))
        assert rendered.startswith("func(var_")
        assert rendered.endswith(".eq(1)")

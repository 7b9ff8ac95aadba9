import pytest

from ads_lib.core.constants import AdsUtility
from ads_lib.core.exceptions import QueryBuildError
from ads_lib.utils.statement_builder import (
    BindVariable,
    BooleanValue,
    NumberValue,
    StatementBuilder,
    TextValue,
    to_value,
)


def test_full_query():
    statement = (
        StatementBuilder()
        .select("id, name")
        .from_("Line_Item")
        .where("status = :status")
        .order_by("id ASC")
        .limit(10)
        .offset(20)
        .to_statement()
    )

    assert statement.query == (
        "SELECT id, name FROM Line_Item WHERE status = :status ORDER BY id ASC LIMIT 10 OFFSET 20"
    )


def test_keywords_are_stripped_case_insensitively():
    query = (
        StatementBuilder()
        .select("select id")
        .from_("FROM Line_Item")
        .where("  where id = 1")
        .order_by("order  by id DESC")
        .build_query()
    )

    assert query == "SELECT id FROM Line_Item WHERE id = 1 ORDER BY id DESC"


def test_filter_statement_without_select():
    statement = StatementBuilder().where("id IN (1, 2)").to_statement()

    assert statement.query == "WHERE id IN (1, 2)"
    assert statement.values == []


def test_select_requires_from():
    with pytest.raises(QueryBuildError) as exc_info:
        StatementBuilder().select("id").build_query()
    assert exc_info.value.clause == "FROM"


def test_from_requires_select():
    with pytest.raises(QueryBuildError):
        StatementBuilder().from_("Line_Item").build_query()


def test_offset_requires_limit():
    with pytest.raises(QueryBuildError):
        StatementBuilder().where("id = 1").offset(5).build_query()


@pytest.mark.parametrize("method", ["limit", "offset"])
def test_negative_paging_rejected(method):
    with pytest.raises(QueryBuildError):
        getattr(StatementBuilder(), method)(-1)


def test_paging_through_results():
    builder = StatementBuilder().limit(StatementBuilder.SUGGESTED_PAGE_LIMIT)

    builder.increase_offset_by(StatementBuilder.SUGGESTED_PAGE_LIMIT)
    builder.increase_offset_by(StatementBuilder.SUGGESTED_PAGE_LIMIT)

    assert builder.offset_value == 1000
    assert builder.build_query() == "LIMIT 500 OFFSET 1000"
    assert builder.remove_limit_and_offset().build_query() == ""


def test_bind_variables_are_typed():
    statement = (
        StatementBuilder()
        .where("name = :name AND id = :id AND archived = :archived")
        .with_bind_variable("name", "rule")
        .with_bind_variable("id", 42)
        .with_bind_variable("archived", False)
        .to_statement()
    )

    assert statement.values == [
        BindVariable("name", TextValue("rule")),
        BindVariable("id", NumberValue("42")),
        BindVariable("archived", BooleanValue(False)),
    ]
    assert statement.to_dict()["values"][1] == {
        "key": "id",
        "value": {"xsi_type": "NumberValue", "value": "42"},
    }


def test_rebinding_a_key_replaces_value():
    statement = (
        StatementBuilder()
        .with_bind_variable("id", 1)
        .with_bind_variable("id", 2)
        .to_statement()
    )

    assert statement.values == [BindVariable("id", NumberValue("2"))]


def test_unsupported_bind_type():
    with pytest.raises(QueryBuildError):
        to_value(object())


def test_to_statement_records_usage(registry):
    builder = StatementBuilder(registry).where("id = 1")
    assert len(registry) == 0

    builder.to_statement()

    assert registry.get_registered_utilities() == frozenset({AdsUtility.STATEMENT_BUILDER})


def test_without_registry_nothing_recorded():
    StatementBuilder().where("id = 1").to_statement()

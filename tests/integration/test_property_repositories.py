"""Integration tests for the owner/property/trace/image repositories.

Runs against a fresh SQLite database per test (see ``test_database``).

Tests cover:
- Owner ids: generated and explicit
- Property uniqueness lookup and soft delete visibility
- Listing filters, paging, owner name, image counts and last trace
- Traces ordered by id, images grouped per property
"""

from datetime import UTC, date, datetime, timedelta
from decimal import Decimal

import pytest

from src.domain.entities.owner import Owner
from src.domain.entities.property import Property
from src.domain.entities.property_image import PropertyImage
from src.domain.entities.property_trace import PropertyTrace
from src.domain.enums import EntityState
from src.domain.value_objects.property_filter import PropertyFilter
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

T0 = datetime(2026, 1, 1, 9, 0, tzinfo=UTC)


def _owner(name: str, owner_id: int | None = None) -> Owner:
    return Owner(
        id=owner_id, name=name, address="Calle 1", birthday=date(1980, 1, 1), photo=None
    )


def _property(owner_id: int, code: str, name: str, price: str, year: int = 2015) -> Property:
    return Property(
        id=None,
        name=name,
        address="Carrera 7",
        price=Decimal(price),
        code_internal=code,
        year=year,
        owner_id=owner_id,
    )


async def _seed(uow: SqlAlchemyUnitOfWork) -> dict[str, int]:
    ana = await uow.owners.add(_owner("Ana"))
    luis = await uow.owners.add(_owner("Luis"))
    casa = await uow.properties.add(_property(ana.id, "P-1", "Casa Azul", "100000.00", 2010))
    finca = await uow.properties.add(_property(ana.id, "P-2", "Finca Verde", "300000.00", 2015))
    apto = await uow.properties.add(_property(luis.id, "P-3", "Apto Casa Sol", "200000.00", 2015))
    await uow.commit()
    return {"ana": ana.id, "luis": luis.id, "casa": casa.id, "finca": finca.id, "apto": apto.id}


@pytest.mark.integration
class TestOwnerRepository:
    @pytest.mark.asyncio
    async def test_generated_id(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)

        owner = await uow.owners.add(_owner("Ana"))
        await uow.commit()

        assert owner.id is not None
        assert owner.state is EntityState.LOADED
        loaded = await uow.owners.find_by_id(owner.id)
        assert loaded.name == "Ana"
        assert loaded.birthday == date(1980, 1, 1)

    @pytest.mark.asyncio
    async def test_explicit_id_is_kept(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)

        owner = await uow.owners.add(_owner("Marta", owner_id=42))
        await uow.commit()

        assert owner.id == 42
        assert await uow.owners.exists(42)

    @pytest.mark.asyncio
    async def test_update_writes_dirty_owner(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        owner = await uow.owners.add(_owner("Ana"))
        await uow.commit()

        owner.update_details(
            name="Ana Maria", address="Calle 2", birthday=date(1981, 2, 2), photo=None
        )
        await uow.owners.update(owner)
        await uow.commit()

        assert (await uow.owners.find_by_id(owner.id)).name == "Ana Maria"

    @pytest.mark.asyncio
    async def test_adding_persisted_owner_is_rejected(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        owner = await uow.owners.add(_owner("Ana"))

        with pytest.raises(ValueError):
            await uow.owners.add(owner)


@pytest.mark.integration
class TestPropertyRepository:
    @pytest.mark.asyncio
    async def test_round_trip_keeps_decimal_price(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        ids = await _seed(uow)

        property_ = await uow.properties.find_by_id(ids["casa"])

        assert property_.price == Decimal("100000.00")
        assert property_.code_internal == "P-1"
        assert property_.state is EntityState.LOADED

    @pytest.mark.asyncio
    async def test_code_exists_with_exclusion(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        ids = await _seed(uow)

        assert await uow.properties.code_exists("P-1")
        assert not await uow.properties.code_exists("P-1", exclude_id=ids["casa"])
        assert not await uow.properties.code_exists("P-404")

    @pytest.mark.asyncio
    async def test_deactivated_property_is_invisible(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        ids = await _seed(uow)
        property_ = await uow.properties.find_by_id(ids["casa"])

        property_.deactivate()
        await uow.properties.update(property_)
        await uow.commit()

        assert await uow.properties.find_by_id(ids["casa"]) is None
        items, total = await uow.properties.list_page(PropertyFilter())
        assert total == 2
        assert ids["casa"] not in [item.id for item in items]

    @pytest.mark.asyncio
    async def test_list_by_owner_ids(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        ids = await _seed(uow)

        properties = await uow.properties.list_by_owner_ids([ids["ana"]])

        assert [p.id for p in properties] == [ids["casa"], ids["finca"]]
        assert await uow.properties.list_by_owner_ids([]) == []


@pytest.mark.integration
class TestPropertyListing:
    @pytest.mark.asyncio
    async def test_unfiltered_page(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        ids = await _seed(uow)

        items, total = await uow.properties.list_page(PropertyFilter())

        assert total == 3
        assert [item.id for item in items] == [ids["casa"], ids["finca"], ids["apto"]]
        assert items[0].owner_name == "Ana"
        assert items[2].owner_name == "Luis"
        assert items[0].image_count == 0
        assert items[0].last_trace is None

    @pytest.mark.asyncio
    async def test_name_filter_is_case_insensitive_substring(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        ids = await _seed(uow)

        items, total = await uow.properties.list_page(PropertyFilter(name="CASA"))

        assert total == 2
        assert {item.id for item in items} == {ids["casa"], ids["apto"]}

    @pytest.mark.asyncio
    async def test_price_year_and_owner_filters(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        ids = await _seed(uow)

        by_price, _ = await uow.properties.list_page(
            PropertyFilter(min_price=Decimal("150000"), max_price=Decimal("300000"))
        )
        by_year, _ = await uow.properties.list_page(PropertyFilter(year=2015))
        by_owner, _ = await uow.properties.list_page(PropertyFilter(owner_id=ids["luis"]))

        assert {item.id for item in by_price} == {ids["finca"], ids["apto"]}
        assert {item.id for item in by_year} == {ids["finca"], ids["apto"]}
        assert [item.id for item in by_owner] == [ids["apto"]]

    @pytest.mark.asyncio
    async def test_paging_reports_total_of_all_matches(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        ids = await _seed(uow)

        items, total = await uow.properties.list_page(PropertyFilter(page=2, page_size=2))

        assert total == 3
        assert [item.id for item in items] == [ids["apto"]]

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        await _seed(uow)

        items, total = await uow.properties.list_page(PropertyFilter(page=5, page_size=10))

        assert items == []
        assert total == 3

    @pytest.mark.asyncio
    async def test_listing_carries_enabled_image_count_and_latest_trace(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        ids = await _seed(uow)
        await uow.images.add(PropertyImage(id=None, property_id=ids["casa"], file="data:a"))
        disabled = await uow.images.add(
            PropertyImage(id=None, property_id=ids["casa"], file="data:b")
        )
        await uow.images.add(PropertyImage(id=None, property_id=ids["casa"], file="data:c"))
        disabled.disable()
        await uow.images.update(disabled)
        for offset, name in enumerate(["Property Created", "Price Update"]):
            await uow.traces.add(
                PropertyTrace(
                    property_id=ids["casa"],
                    name=name,
                    date_sale=T0 + timedelta(days=offset),
                    value=Decimal("100000.00"),
                    tax=Decimal("0.00"),
                )
            )
        await uow.commit()

        items, _ = await uow.properties.list_page(PropertyFilter(owner_id=ids["ana"]))

        casa = next(item for item in items if item.id == ids["casa"])
        assert casa.image_count == 2
        assert casa.last_trace.name == "Price Update"
        assert casa.last_trace.date_sale == T0 + timedelta(days=1)


@pytest.mark.integration
class TestTraceAndImageRepositories:
    @pytest.mark.asyncio
    async def test_traces_listed_in_insertion_order(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        ids = await _seed(uow)
        for name in ("Property Created", "Sold to Luis"):
            await uow.traces.add(
                PropertyTrace(
                    property_id=ids["finca"],
                    name=name,
                    date_sale=T0,
                    value=Decimal("300000.00"),
                    tax=Decimal("30000.00"),
                )
            )
        await uow.commit()

        traces = await uow.traces.list_for_property(ids["finca"])

        assert [trace.name for trace in traces] == ["Property Created", "Sold to Luis"]
        assert traces[1].tax == Decimal("30000.00")

    @pytest.mark.asyncio
    async def test_images_grouped_by_property(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        ids = await _seed(uow)
        first = await uow.images.add(PropertyImage(id=None, property_id=ids["casa"], file="a"))
        await uow.images.add(PropertyImage(id=None, property_id=ids["apto"], file="b"))
        await uow.commit()

        grouped = await uow.images.list_for_properties([ids["casa"], ids["apto"], ids["finca"]])

        assert [image.id for image in grouped[ids["casa"]]] == [first.id]
        assert len(grouped[ids["apto"]]) == 1
        assert grouped[ids["finca"]] == []
        assert (await uow.images.find_by_id(first.id)).file == "a"

"""Unit tests for CustomerRepository."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from admin.infrastructure.customer_repository import CustomerRepository
from admin.infrastructure.models import CustomerModel
from admin.ports.exceptions import BranchNotInTenantError
from admin.ports.repositories import CustomerChanges, ICustomerRepository, NewCustomer


@pytest.fixture
def repository(mock_session, probe):
    return CustomerRepository(session=mock_session, probe=probe)


def first_row(row) -> MagicMock:
    result = MagicMock()
    result.first.return_value = row
    return result


def test_implements_protocol(repository):
    assert isinstance(repository, ICustomerRepository)


class TestCreate:
    async def test_without_branch_skips_lookup(self, repository, mock_session, probe):
        model = await repository.create(
            NewCustomer(tenant_id=1, full_name="Sara Ali", email="sara@example.com")
        )

        assert isinstance(model, CustomerModel)
        assert model.branch_id is None
        assert model.credit_limit == Decimal("0")
        mock_session.execute.assert_not_awaited()
        mock_session.flush.assert_awaited_once()
        probe.record_created.assert_called_once_with("customer", 1, model.id)

    async def test_with_branch_of_tenant(self, repository, mock_session):
        mock_session.execute.return_value = first_row((4,))

        model = await repository.create(
            NewCustomer(
                tenant_id=1,
                full_name="Sara Ali",
                branch_id=4,
                credit_limit=Decimal("1500.00"),
            )
        )

        assert model.branch_id == 4
        assert model.credit_limit == Decimal("1500.00")
        mock_session.add.assert_called_once_with(model)

    async def test_branch_of_other_tenant_is_rejected(
        self, repository, mock_session, probe
    ):
        mock_session.execute.return_value = first_row(None)

        with pytest.raises(BranchNotInTenantError):
            await repository.create(
                NewCustomer(tenant_id=1, full_name="Sara Ali", branch_id=40)
            )

        mock_session.add.assert_not_called()
        probe.record_created.assert_not_called()


async def test_delete_many(repository, mock_session, probe):
    owned = MagicMock()
    owned.scalars.return_value.all.return_value = [2, 3]
    mock_session.execute.side_effect = [owned, None]

    assert await repository.delete_many(1, [2, 3]) == 2
    probe.records_deleted.assert_called_once_with("customer", 1, 2, 2)


def one_or_none(model) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = model
    return result


class TestGetAndUpdate:
    async def test_get_returns_tenant_customer(self, repository, mock_session):
        stored = CustomerModel(id=9, tenant_id=1, full_name="Sara Ali")
        mock_session.execute.return_value = one_or_none(stored)

        assert await repository.get(1, 9) is stored

    async def test_update_keeps_fields_left_out(self, repository, mock_session, probe):
        stored = CustomerModel(
            id=9,
            tenant_id=1,
            full_name="Sara Ali",
            email="sara@example.com",
            phone="0501234567",
            credit_limit=Decimal("100.00"),
        )
        mock_session.execute.return_value = one_or_none(stored)

        model = await repository.update(
            9,
            CustomerChanges(
                tenant_id=1, full_name="Sara Al-Harbi", credit_limit=Decimal("250.00")
            ),
        )

        assert model is stored
        assert stored.full_name == "Sara Al-Harbi"
        assert stored.credit_limit == Decimal("250.00")
        assert stored.email == "sara@example.com"
        assert stored.phone == "0501234567"
        mock_session.flush.assert_awaited_once()
        probe.record_updated.assert_called_once_with("customer", 1, 9)

    async def test_update_missing_customer_is_none(
        self, repository, mock_session, probe
    ):
        mock_session.execute.return_value = one_or_none(None)

        result = await repository.update(
            9, CustomerChanges(tenant_id=1, full_name="Sara Ali")
        )

        assert result is None
        mock_session.flush.assert_not_awaited()
        probe.record_updated.assert_not_called()

    async def test_branch_is_checked_before_customer(
        self, repository, mock_session, probe
    ):
        mock_session.execute.return_value = first_row(None)

        with pytest.raises(BranchNotInTenantError):
            await repository.update(
                9, CustomerChanges(tenant_id=1, full_name="Sara Ali", branch_id=40)
            )

        mock_session.execute.assert_awaited_once()
        probe.record_updated.assert_not_called()

    async def test_update_moves_customer_to_branch(self, repository, mock_session):
        stored = CustomerModel(id=9, tenant_id=1, full_name="Sara Ali", branch_id=2)
        mock_session.execute.side_effect = [first_row((4,)), one_or_none(stored)]

        await repository.update(
            9, CustomerChanges(tenant_id=1, full_name="Sara Ali", branch_id=4)
        )

        assert stored.branch_id == 4

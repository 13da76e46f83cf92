"""Unit tests for BranchRepository."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from admin.infrastructure.branch_repository import BranchRepository
from admin.infrastructure.models import BranchModel
from admin.ports.exceptions import DuplicateBranchNameError
from admin.ports.repositories import IBranchRepository, NewBranch


@pytest.fixture
def repository(mock_session, probe):
    return BranchRepository(session=mock_session, probe=probe)


def first_row(row) -> MagicMock:
    result = MagicMock()
    result.first.return_value = row
    return result


def test_implements_protocol(repository):
    assert isinstance(repository, IBranchRepository)


class TestCreate:
    async def test_inserts_branch(self, repository, mock_session, probe):
        mock_session.execute.return_value = first_row(None)

        model = await repository.create(
            NewBranch(
                tenant_id=1,
                name="Main Branch",
                name_ar="الفرع الرئيسي",
                latitude=Decimal("24.7136"),
                longitude=Decimal("46.6753"),
            )
        )

        assert isinstance(model, BranchModel)
        assert model.name == "Main Branch"
        assert model.latitude == Decimal("24.7136")
        assert model.address is None
        mock_session.add.assert_called_once_with(model)
        probe.record_created.assert_called_once_with("branch", 1, model.id)

    async def test_duplicate_name_in_tenant_is_rejected(
        self, repository, mock_session, probe
    ):
        mock_session.execute.return_value = first_row((4,))

        with pytest.raises(DuplicateBranchNameError):
            await repository.create(NewBranch(tenant_id=1, name="Main Branch"))

        mock_session.add.assert_not_called()
        probe.duplicate_rejected.assert_called_once_with("branch", 1, "Main Branch")

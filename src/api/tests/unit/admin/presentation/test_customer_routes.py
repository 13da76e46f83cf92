"""Unit tests for the customer routes."""

from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi import status

from admin.infrastructure.models import BranchModel, CustomerModel
from admin.ports import BranchNotInTenantError, CustomerChanges, NewCustomer, Page


@pytest.fixture
def payload() -> dict:
    return {
        "tenant_id": 1,
        "full_name": "Sara Ali",
        "email": "sara@example.com",
    }


class TestCreateCustomer:
    def test_creates_with_defaults(self, test_client, customer_repository, payload):
        response = test_client.post("/customers", json=payload)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json() == {"message": "Customer created successfully."}
        customer_repository.create.assert_awaited_once_with(
            NewCustomer(
                tenant_id=1,
                full_name="Sara Ali",
                email="sara@example.com",
                credit_limit=Decimal("0"),
            )
        )

    def test_creates_with_branch_and_credit(
        self, test_client, customer_repository, payload
    ):
        payload.update(branch_id="4", phone="+966 50 123 4567", credit_limit=1500)

        response = test_client.post("/customers", json=payload)

        assert response.status_code == status.HTTP_201_CREATED
        created = customer_repository.create.await_args.args[0]
        assert created.branch_id == 4
        assert created.phone == "+966 50 123 4567"
        assert created.credit_limit == Decimal("1500")

    def test_invalid_email_and_phone(self, test_client, payload):
        payload.update(email="sara", phone="12")

        response = test_client.post("/customers", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "error": {
                "email": "Email must be a valid email address.",
                "phone": "Phone must be a valid phone number.",
            }
        }

    def test_branch_of_other_tenant_is_404(
        self, test_client, customer_repository, payload
    ):
        payload["branch_id"] = 40
        customer_repository.create.side_effect = BranchNotInTenantError("no")

        response = test_client.post("/customers", json=payload)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Branch not found for this tenant."}

    def test_fractional_branch_id_is_404(
        self, test_client, customer_repository, payload
    ):
        payload["branch_id"] = 4.5

        response = test_client.post("/customers", json=payload)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        customer_repository.create.assert_not_awaited()

    def test_superscript_branch_id_is_rejected(
        self, test_client, customer_repository, payload
    ):
        payload["branch_id"] = "²"

        response = test_client.post("/customers", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert set(response.json()["error"]) == {"branch_id"}
        customer_repository.create.assert_not_awaited()

    def test_credit_limit_beyond_column_is_400(
        self, test_client, customer_repository, payload
    ):
        payload["credit_limit"] = 10**10

        response = test_client.post(
            "/customers", json=payload, headers={"Accept-Language": "ar"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "error": {"credit_limit": "الحد الائتماني خارج النطاق المسموح."}
        }
        customer_repository.create.assert_not_awaited()

    def test_without_permission_is_401(
        self, test_client, caller, limited_identity, payload
    ):
        caller.identity = limited_identity

        response = test_client.post("/customers", json=payload)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestListCustomers:
    def test_includes_branch_name(self, test_client, customer_repository):
        customer = CustomerModel(
            id=9,
            tenant_id=1,
            full_name="Sara Ali",
            credit_limit=Decimal("0"),
            branch_id=4,
        )
        customer.branch = BranchModel(id=4, tenant_id=1, name="Main")
        customer_repository.list_page.return_value = Page(
            items=[customer], count=1, page=1, page_size=20
        )

        response = test_client.get("/customers", params={"tenant_id": "1"})

        assert response.status_code == status.HTTP_200_OK
        [row] = response.json()["data"]
        assert row["branch_id"] == 4
        assert row["branch_name"] == "Main"

    def test_missing_tenant_is_400(self, test_client):
        response = test_client.get("/customers")

        assert response.json() == {"error": "Tenant ID is required."}


class TestDeleteCustomers:
    def test_deletes(self, test_client, customer_repository):
        customer_repository.delete_many.return_value = 1

        response = test_client.request(
            "DELETE", "/customers", json={"tenant_id": 1, "customer_ids": [9]}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Deleted 1 customer(s)."}

    def test_requires_delete_permission(
        self, test_client, caller, customer_repository
    ):
        from shared_kernel.authorization import Identity

        caller.identity = Identity.create(
            user_id=20,
            tenant_id=1,
            roles=["sales"],
            permissions=["create_customer", "view_customers"],
        )

        response = test_client.request(
            "DELETE", "/customers", json={"tenant_id": 1, "customer_ids": [9]}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        customer_repository.delete_many.assert_not_awaited()


class TestGetCustomer:
    def test_returns_customer_with_branch(self, test_client, customer_repository):
        customer = CustomerModel(
            id=9,
            tenant_id=1,
            full_name="Sara Ali",
            credit_limit=Decimal("0"),
            branch_id=4,
        )
        customer.branch = BranchModel(id=4, tenant_id=1, name="Main")
        customer_repository.get.return_value = customer

        response = test_client.get("/customers/9", params={"tenant_id": "1"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["branch_name"] == "Main"
        customer_repository.get.assert_awaited_once_with(1, 9)

    def test_unknown_customer_is_404(self, test_client, customer_repository):
        customer_repository.get.return_value = None

        response = test_client.get("/customers/9", params={"tenant_id": "1"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Customer not found."}


class TestUpdateCustomer:
    def test_passes_only_given_fields(self, test_client, customer_repository):
        customer_repository.update.return_value = CustomerModel(id=9, tenant_id=1)

        response = test_client.put(
            "/customers/9",
            json={
                "tenant_id": 1,
                "full_name": "Sara Al-Harbi",
                "phone": "",
                "credit_limit": 250,
            },
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Customer updated successfully."}
        customer_repository.update.assert_awaited_once_with(
            9,
            CustomerChanges(
                tenant_id=1, full_name="Sara Al-Harbi", credit_limit=Decimal("250")
            ),
        )

    def test_arabic_confirmation(self, test_client, customer_repository, payload):
        customer_repository.update.return_value = CustomerModel(id=9, tenant_id=1)

        response = test_client.put(
            "/customers/9", json=payload, headers={"Accept-Language": "ar"}
        )

        assert response.json() == {"message": "تم تحديث بيانات العميل بنجاح."}

    def test_requires_edit_permission(self, test_client, caller, customer_repository):
        from shared_kernel.authorization import Identity

        caller.identity = Identity.create(
            user_id=20,
            tenant_id=1,
            roles=["sales"],
            permissions=["create_customer", "view_customers"],
        )

        response = test_client.put("/customers/9", json={})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        customer_repository.update.assert_not_awaited()

    def test_full_name_is_required(self, test_client, customer_repository):
        response = test_client.put("/customers/9", json={"tenant_id": 1})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": {"full_name": "Full Name is required."}}
        customer_repository.update.assert_not_awaited()

    def test_foreign_tenant_is_401(self, test_client, customer_repository, payload):
        payload["tenant_id"] = 2

        response = test_client.put("/customers/9", json=payload)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        customer_repository.update.assert_not_awaited()

    def test_branch_of_other_tenant_is_404(
        self, test_client, customer_repository, payload
    ):
        customer_repository.update.side_effect = BranchNotInTenantError("nope")
        payload["branch_id"] = 40

        response = test_client.put("/customers/9", json=payload)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Branch not found for this tenant."}

    def test_unknown_customer_is_404(self, test_client, customer_repository, payload):
        customer_repository.update.return_value = None

        response = test_client.put(
            "/customers/9", json=payload, headers={"Accept-Language": "ar"}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "العميل غير موجود."}


class TestDeleteCustomer:
    def test_deletes_customer(self, test_client, customer_repository):
        customer_repository.delete_many.return_value = 1

        response = test_client.request("DELETE", "/customers/9", json={"tenant_id": 1})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Customer deleted successfully."}
        customer_repository.delete_many.assert_awaited_once_with(1, [9])

    def test_unknown_customer_is_404(self, test_client, customer_repository):
        customer_repository.delete_many.return_value = 0

        response = test_client.request("DELETE", "/customers/9", json={"tenant_id": 1})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Customer not found."}

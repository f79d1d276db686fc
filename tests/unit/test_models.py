"""Tests for response envelopes and resource models."""

import httpx

from armrest_cli.models import (
    ArmResource,
    ArmrestCollection,
    PublicIpAddress,
    ResourceGroup,
    ResponseHeaders,
    StorageAccount,
    VirtualMachine,
)
from armrest_cli.models.envelope import skip_token_from

SUB = "00000000-1111-2222-3333-444444444444"


class TestResponseHeaders:
    def test_keys_lower_cased(self):
        headers = ResponseHeaders(status_code=202, headers={"Azure-AsyncOperation": "https://op"})
        assert headers.headers == {"azure-asyncoperation": "https://op"}
        assert headers.azure_asyncoperation == "https://op"
        assert headers.get("AZURE-ASYNCOPERATION") == "https://op"

    def test_from_response(self):
        response = httpx.Response(
            202,
            headers={
                "Location": "https://management.azure.com/operations/1",
                "Retry-After": "15",
                "x-ms-request-id": "req-1",
                "x-ms-correlation-request-id": "corr-1",
                "x-ms-ratelimit-remaining-subscription-writes": "1199",
            },
        )
        headers = ResponseHeaders.from_response(response)
        assert headers.status_code == 202
        assert headers.location == "https://management.azure.com/operations/1"
        assert headers.retry_after == 15
        assert headers.request_id == "req-1"
        assert headers.correlation_request_id == "corr-1"
        assert headers.remaining_writes == 1199
        assert headers.remaining_reads is None

    def test_missing_values(self):
        headers = ResponseHeaders(status_code=200)
        assert headers.azure_asyncoperation is None
        assert headers.retry_after is None
        assert headers.get("anything", "fallback") == "fallback"


class TestArmrestCollection:
    def test_create_from_response(self):
        response = httpx.Response(
            200,
            json={
                "value": [{"name": "vm1"}, {"name": "vm2"}],
                "nextLink": "https://management.azure.com/x?api-version=1&$skiptoken=abc123",
            },
            headers={"x-ms-request-id": "r1"},
        )
        results = ArmrestCollection.create_from_response(response, VirtualMachine)
        assert [vm.name for vm in results] == ["vm1", "vm2"]
        assert all(isinstance(vm, VirtualMachine) for vm in results)
        assert results.response_headers.request_id == "r1"
        assert results.skip_token == "abc123"

    def test_empty_body(self):
        results = ArmrestCollection.create_from_response(httpx.Response(200), VirtualMachine)
        assert results == []
        assert results.response_headers.status_code == 200
        assert results.skip_token is None

    def test_no_next_link(self):
        response = httpx.Response(200, json={"value": []})
        results = ArmrestCollection.create_from_response(response, VirtualMachine)
        assert results.next_link is None
        assert results.skip_token is None

    def test_is_a_list(self):
        results = ArmrestCollection([1, 2])
        assert isinstance(results, list)
        assert results.response_headers is None

    def test_skip_token_from_link_without_token(self):
        assert skip_token_from("https://management.azure.com/x?api-version=1") is None


class TestArmResource:
    def test_resource_group_from_id(self):
        vm = VirtualMachine(
            id=f"/subscriptions/{SUB}/resourceGroups/My-RG/providers/Microsoft.Compute/virtualMachines/vm1",
        )
        assert vm.resource_group == "My-RG"

    def test_resource_group_lower_case_id(self):
        vm = VirtualMachine(id=f"/subscriptions/{SUB}/resourcegroups/rg2/providers/x/y/z")
        assert vm.resource_group == "rg2"

    def test_no_id(self):
        assert ArmResource().resource_group is None

    def test_unknown_keys_kept(self):
        vm = VirtualMachine.model_validate({"name": "vm1", "managedBy": "aks"})
        assert vm.managedBy == "aks"
        assert vm.model_dump()["managedBy"] == "aks"

    def test_response_headers_not_serialized(self):
        vm = VirtualMachine(name="vm1")
        vm.response_headers = ResponseHeaders(status_code=200)
        assert "response_headers" not in vm.model_dump()

    def test_equality_ignores_response_headers(self):
        a = VirtualMachine(name="vm1", location="eastus")
        b = VirtualMachine(name="vm1", location="eastus")
        a.response_headers = ResponseHeaders(status_code=200, headers={"x-ms-request-id": "r1"})
        b.response_headers = ResponseHeaders(status_code=200, headers={"x-ms-request-id": "r2"})
        assert a == b
        assert a != VirtualMachine(name="vm1", location="westus")
        assert a != ArmResource(name="vm1", location="eastus")

    def test_vm_properties(self):
        vm = VirtualMachine.model_validate(
            {
                "name": "vm1",
                "properties": {
                    "provisioningState": "Succeeded",
                    "hardwareProfile": {"vmSize": "Standard_B2s"},
                    "storageProfile": {"osDisk": {"osType": "Linux"}},
                },
            }
        )
        assert vm.vm_size == "Standard_B2s"
        assert vm.os_type == "Linux"
        assert vm.provisioning_state == "Succeeded"

    def test_storage_account(self):
        account = StorageAccount.model_validate(
            {"name": "sa1", "kind": "StorageV2", "properties": {"primaryEndpoints": {"blob": "https://sa1"}}}
        )
        assert account.kind == "StorageV2"
        assert account.primary_endpoints == {"blob": "https://sa1"}

    def test_public_ip(self):
        ip = PublicIpAddress.model_validate({"name": "ip1", "properties": {"ipAddress": "20.1.2.3"}})
        assert ip.ip_address == "20.1.2.3"

    def test_resource_group_alias(self):
        group = ResourceGroup.model_validate({"name": "rg1", "managedBy": "databricks"})
        assert group.managed_by == "databricks"
        assert group.model_dump(by_alias=True)["managedBy"] == "databricks"

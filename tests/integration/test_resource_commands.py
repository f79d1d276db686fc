"""Integration tests for resource commands."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import respx
from typer.testing import CliRunner

from armrest_cli.app import app

runner = CliRunner()
SUB = "00000000-1111-2222-3333-444444444444"
BASE = f"https://management.azure.com/subscriptions/{SUB}"
AUTH = ["--subscription", SUB, "--token", "tok"]
VM_QUERY = "?api-version=2023-03-01"


def _vm_url(group: str, name: str | None = None) -> str:
    url = f"{BASE}/resourceGroups/{group}/providers/Microsoft.Compute/virtualMachines"
    if name:
        url += f"/{name}"
    return url + VM_QUERY


def _vm(name: str, group: str = "rg1", location: str = "eastus") -> dict:
    return {
        "id": f"/subscriptions/{SUB}/resourceGroups/{group}/providers/Microsoft.Compute/virtualMachines/{name}",
        "name": name,
        "location": location,
        "properties": {"provisioningState": "Succeeded"},
    }


class TestResourceCommands:
    def test_services(self):
        result = runner.invoke(app, ["resource", "services"])
        assert result.exit_code == 0
        assert "virtualMachines" in result.output
        assert "deployment" in result.output

    @respx.mock
    def test_list(self):
        respx.get(_vm_url("rg1")).mock(
            return_value=httpx.Response(200, json={"value": [_vm("vm1"), _vm("vm2")]})
        )
        result = runner.invoke(app, ["resource", "list", "vm", "--group", "rg1", *AUTH])
        assert result.exit_code == 0
        assert "vm1" in result.output
        assert "vm2" in result.output

    def test_list_without_group_fails(self):
        result = runner.invoke(app, ["resource", "list", "vm", *AUTH])
        assert result.exit_code == 6

    def test_unknown_service(self):
        result = runner.invoke(app, ["resource", "list", "toaster", "--group", "rg1", *AUTH])
        assert result.exit_code == 1
        assert "Unknown service" in result.output

    @respx.mock
    def test_list_all_groups(self):
        respx.get(f"{BASE}/resourcegroups?api-version=2016-09-01").mock(
            return_value=httpx.Response(200, json={"value": [{"name": "rg1"}, {"name": "rg2"}]})
        )
        respx.get(_vm_url("rg1")).mock(
            return_value=httpx.Response(200, json={"value": [_vm("vm1")]})
        )
        respx.get(_vm_url("rg2")).mock(
            return_value=httpx.Response(200, json={"value": [_vm("vm2", "rg2")]})
        )
        result = runner.invoke(app, ["resource", "list", "vm", "--all-groups", "--format", "json", *AUTH])
        assert result.exit_code == 0
        names = sorted(vm["name"] for vm in json.loads(result.output))
        assert names == ["vm1", "vm2"]

    def test_all_groups_rejects_group(self):
        result = runner.invoke(app, ["resource", "list", "vm", "--all-groups", "--group", "rg1", *AUTH])
        assert result.exit_code == 1
        assert "cannot be combined" in result.output

    @respx.mock
    def test_list_all_with_filter(self):
        respx.get(f"{BASE}/providers/Microsoft.Compute/virtualMachines{VM_QUERY}").mock(
            return_value=httpx.Response(200, json={"value": [
                _vm("vm1", location="eastus"),
                _vm("vm2", location="westus"),
            ]})
        )
        result = runner.invoke(app, [
            "resource", "list-all", "vm", "--filter", "location=westus",
            "--format", "json", *AUTH,
        ])
        assert result.exit_code == 0
        assert [vm["name"] for vm in json.loads(result.output)] == ["vm2"]

    @respx.mock
    def test_show(self):
        respx.get(_vm_url("rg1", "vm1")).mock(
            return_value=httpx.Response(200, json=_vm("vm1"))
        )
        result = runner.invoke(app, ["resource", "show", "vm", "vm1", "-g", "rg1", *AUTH])
        assert result.exit_code == 0
        assert "vm1" in result.output
        assert "eastus" in result.output

    @respx.mock
    def test_show_not_found(self):
        respx.get(_vm_url("rg1", "nope")).mock(
            return_value=httpx.Response(
                404, json={"error": {"code": "ResourceNotFound", "message": "vm nope not found"}},
            )
        )
        result = runner.invoke(app, ["resource", "show", "vm", "nope", "-g", "rg1", *AUTH])
        assert result.exit_code == 4

    @respx.mock
    def test_create_from_file(self, tmp_path: Path):
        route = respx.put(_vm_url("rg1", "vm1")).mock(
            return_value=httpx.Response(
                201, json=_vm("vm1"),
                headers={"Azure-AsyncOperation": "https://management.azure.com/op/42"},
            )
        )
        body = tmp_path / "vm.json"
        body.write_text('{"location": "eastus"}')
        result = runner.invoke(app, [
            "resource", "create", "vm", "vm1", "-g", "rg1", "--file", str(body), *AUTH,
        ])
        assert result.exit_code == 0
        assert json.loads(route.calls.last.request.content) == {"location": "eastus"}
        assert "op/42" in result.output

    @respx.mock
    def test_create_accepted_without_body(self):
        respx.put(_vm_url("rg1", "vm1")).mock(return_value=httpx.Response(202))
        result = runner.invoke(app, [
            "resource", "create", "vm", "vm1", "-g", "rg1", "--body", '{"location": "eastus"}', *AUTH,
        ])
        assert result.exit_code == 0
        assert "accepted" in result.output

    @respx.mock
    def test_delete(self):
        respx.delete(_vm_url("rg1", "vm1")).mock(
            return_value=httpx.Response(202, headers={"Location": "https://management.azure.com/op/7"})
        )
        result = runner.invoke(app, ["resource", "delete", "vm", "vm1", "-g", "rg1", "--force", *AUTH])
        assert result.exit_code == 0
        assert "op/7" in result.output

    @respx.mock
    def test_delete_204_reports_not_found(self):
        respx.delete(_vm_url("rg1", "vm1")).mock(return_value=httpx.Response(204))
        result = runner.invoke(app, ["resource", "delete", "vm", "vm1", "-g", "rg1", "--force", *AUTH])
        assert result.exit_code == 4

    def test_no_subscription(self):
        result = runner.invoke(app, ["resource", "list-all", "vm", "--token", "tok"])
        assert result.exit_code == 6

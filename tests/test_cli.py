"""
End-to-end tests for the `cf-zone-export` command (mocked Cloudflare API).
"""

import functools
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from adapters.http_client import build_api_client
from conftest import error_envelope, zones_page

runner = CliRunner()

ZONES = [("abc", "example.com"), ("def", "example.org")]


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def use_handler(monkeypatch, handler):
    monkeypatch.setattr(
        cli_main,
        "build_api_client",
        functools.partial(build_api_client, transport=httpx.MockTransport(handler)),
    )


def write_env(path: Path, api_key="c2547eb745079dac", email="ops@example.com", **extra):
    lines = [f"CLOUDFLARE_API_KEY={api_key}", f"CLOUDFLARE_USER_EMAIL={email}"]
    lines += [f"{key}={value}" for key, value in extra.items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def cloudflare(export_status=None):
    """Handler serving ZONES on one page and a text export per zone."""
    export_status = export_status or {}

    def handler(request):
        path = request.url.path
        if path == "/client/v4/zones":
            return httpx.Response(200, json=zones_page(ZONES))
        zone_id = path.split("/")[4]
        status = export_status.get(zone_id, 200)
        if status != 200:
            return httpx.Response(status, json=error_envelope("Forbidden"))
        return httpx.Response(200, text=f"; zone {zone_id}\nA {zone_id} 1.2.3.4\n")

    return handler


class TestExportCommand:
    def test_exports_all_zones_with_default_env(self, workdir, monkeypatch):
        write_env(workdir / ".env")
        use_handler(monkeypatch, cloudflare())

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 0, result.output
        assert "[Loaded environment data]" in result.output
        assert "Fetching batch of 2 DNS records ..." in result.output
        assert "Fetched 2 domains." in result.output
        assert "Successfully exported DNS records for example.com" in result.output
        assert "Successfully exported DNS records for example.org" in result.output
        assert (workdir / "domains" / "example.com.txt").read_text() == "; zone abc\nA abc 1.2.3.4\n"
        assert (workdir / "domains" / "example.org.txt").exists()

    def test_custom_env_file(self, workdir, monkeypatch):
        write_env(workdir / "prod.env", CLOUDFLARE_EXPORT_DIR="exports")
        use_handler(monkeypatch, cloudflare())

        result = runner.invoke(cli_main.app, ["prod.env"])

        assert result.exit_code == 0, result.output
        assert "Using custom ENV file: prod.env" in result.output
        assert (workdir / "exports" / "example.com.txt").exists()

    def test_missing_custom_env_file(self, workdir):
        result = runner.invoke(cli_main.app, ["missing.env"])
        assert result.exit_code == 1
        assert "Specified environment file 'missing.env' not found" in result.output

    def test_missing_default_env_file(self, workdir):
        result = runner.invoke(cli_main.app, [])
        assert result.exit_code == 1
        assert "No environment (.env) file found." in result.output
        assert "cp .env.example .env" in result.output

    def test_placeholder_credentials(self, workdir, monkeypatch):
        write_env(workdir / ".env", api_key="NULL", email="NULL")

        def handler(request):
            raise AssertionError("no request expected before credentials are valid")

        use_handler(monkeypatch, handler)

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 1
        assert "default placeholder values" in result.output

    def test_api_error_lists_messages(self, workdir, monkeypatch):
        write_env(workdir / ".env")
        use_handler(monkeypatch, lambda request: httpx.Response(200, json=error_envelope("Invalid request headers")))

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 1
        assert "Cloudflare API returned an unsuccessful response" in result.output
        assert "  - Invalid request headers" in result.output
        assert not (workdir / "domains").exists()

    def test_authentication_failure(self, workdir, monkeypatch):
        write_env(workdir / ".env")
        use_handler(monkeypatch, lambda request: httpx.Response(403, json=error_envelope("Authentication error")))

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 1
        assert "Authentication failed with Cloudflare API" in result.output

    def test_export_failure_halts_remaining_zones(self, workdir, monkeypatch):
        write_env(workdir / ".env")
        use_handler(monkeypatch, cloudflare(export_status={"abc": 403}))

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 1
        assert "status code 403 when fetching DNS records for example.com" in result.output
        assert not (workdir / "domains" / "example.com.txt").exists()
        assert not (workdir / "domains" / "example.org.txt").exists()

    def test_continue_on_error_exports_the_rest(self, workdir, monkeypatch):
        write_env(workdir / ".env", CLOUDFLARE_CONTINUE_ON_ERROR="true")
        use_handler(monkeypatch, cloudflare(export_status={"abc": 500}))

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 1
        assert "Successfully exported DNS records for example.org" in result.output
        assert "Failed to export DNS records for 1 domain(s)" in result.output
        assert (workdir / "domains" / "example.org.txt").exists()
        assert not (workdir / "domains" / "example.com.txt").exists()

    def test_long_diagnostics_stay_on_one_line(self, workdir, monkeypatch):
        """Piped output is not wrapped at 80 columns, so each diagnostic is one greppable line."""
        long_zone = "a-rather-long-subdomain-label.customer-production-zone.example.com"
        write_env(workdir / ".env")

        def handler(request):
            if request.url.path == "/client/v4/zones":
                return httpx.Response(200, json=zones_page([("abc", long_zone)]))
            return httpx.Response(500, json=error_envelope("Internal error"))

        use_handler(monkeypatch, handler)

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 1
        expected = f"Error: Cloudflare API returned status code 500 when fetching DNS records for {long_zone}"
        assert expected in result.output.splitlines()

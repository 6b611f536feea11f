"""Tests for application settings and startup wiring."""

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api import dependencies
from app.config import Settings, get_settings
from app.main import create_app


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("HEROKU_APP_NAME", "HEROKU_RELEASE_VERSION", "PORT", "API_UPDATE_URL"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.app_name == "Unknown Name"
        assert settings.app_version == "Unknown Version"
        assert settings.port == 8080
        assert settings.api_update_url == ""
        assert settings.max_concurrent_requests == 0
        assert settings.explorer_base_url == "https://chain.so/api/v2/get_tx_received/LTC"

    def test_heroku_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HEROKU_APP_NAME", "ltc-monitor")
        monkeypatch.setenv("HEROKU_RELEASE_VERSION", "v42")
        monkeypatch.setenv("PORT", "5000")
        monkeypatch.setenv("API_UPDATE_URL", "https://hooks.example.com/ltc")
        monkeypatch.setenv("LTC_ADDR", "Lbalance")

        settings = Settings(_env_file=None)

        assert settings.app_name == "ltc-monitor"
        assert settings.app_version == "v42"
        assert settings.port == 5000
        assert settings.api_update_url == "https://hooks.example.com/ltc"
        assert settings.ltc_addr == "Lbalance"

    def test_base_urls_normalized(self) -> None:
        settings = Settings(_env_file=None, explorer_base_url="https://explorer.test/txs/")

        assert settings.explorer_base_url == "https://explorer.test/txs"


class TestDepositAddresses:
    """Tests for the startup address list."""

    @pytest.fixture(autouse=True)
    def reset_addresses(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(dependencies, "_deposit_addresses", None)

    def test_loaded_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LTC_ADDRESS_LIST", "LTC1234567890abcdef, LTC0987654321fedcba")

        addresses = dependencies.load_deposit_addresses(Settings(_env_file=None))

        assert addresses == ["LTC1234567890abcdef", "LTC0987654321fedcba"]

    def test_loaded_from_env_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.delenv("LTC_ADDRESS_LIST", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("LTC_ADDRESS_LIST=Lfile1, Lfile2\n")

        addresses = dependencies.load_deposit_addresses(Settings(_env_file=env_file))

        assert addresses == ["Lfile1", "Lfile2"]

    def test_loaded_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LTC_ADDRESS_LIST", "La")
        first = dependencies.load_deposit_addresses(Settings(_env_file=None))
        monkeypatch.setenv("LTC_ADDRESS_LIST", "Lb")

        assert dependencies.get_deposit_addresses(Settings(_env_file=None)) is first

    def test_unset_runs_with_empty_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LTC_ADDRESS_LIST", raising=False)

        assert dependencies.load_deposit_addresses(Settings(_env_file=None)) == []

class TestStaticAssets:
    """Tests for static file serving."""

    def test_serves_static_directory(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        (tmp_path / "style.css").write_text("body { color: black; }")
        monkeypatch.setenv("STATIC_DIR", str(tmp_path))
        get_settings.cache_clear()
        try:
            client = TestClient(create_app())

            assert client.get("/style.css").text == "body { color: black; }"
            assert client.get("/missing.css").status_code == 404
            assert "name" in client.get("/").json()
        finally:
            get_settings.cache_clear()


class TestRequestTimeout:
    """Outbound clients are bounded by the configured timeout."""

    @pytest.fixture(autouse=True)
    def reset_singletons(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(dependencies, "_transaction_provider", None)
        monkeypatch.setattr(dependencies, "_balance_provider", None)
        monkeypatch.setattr(dependencies, "_forwarder", None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "factory",
        [
            dependencies.get_transaction_provider,
            dependencies.get_balance_provider,
            dependencies.get_forwarder,
        ],
    )
    async def test_clients_use_configured_timeout(self, factory) -> None:
        settings = Settings(_env_file=None, http_timeout=7.5)

        component = factory(settings)
        client = await component._get_client()
        try:
            assert component.timeout == 7.5
            assert client.timeout == httpx.Timeout(7.5)
        finally:
            await component.close()

    @pytest.mark.asyncio
    async def test_closed_client_is_recreated(self) -> None:
        provider = dependencies.get_transaction_provider(Settings(_env_file=None, http_timeout=3.0))

        first = await provider._get_client()
        await provider.close()
        second = await provider._get_client()
        await provider.close()

        assert first is not second
        assert second.timeout == httpx.Timeout(3.0)

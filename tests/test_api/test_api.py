"""
API Endpoint Tests.

Drives the FastAPI app in-process through httpx.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from bayeslens.main import create_app


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["service"] == "bayeslens"

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, client):
        resp = await client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert resp.headers["X-Request-ID"] == "abc-123"
        assert resp.headers["X-Response-Time"].endswith("ms")
        assert resp.headers["X-BayesLens-Version"] == resp.json()["version"]


class TestDiscreteUpdate:
    @pytest.mark.asyncio
    async def test_coin_scenario(self, client, coin_prior, heads_likelihood):
        resp = await client.post(
            "/api/v1/discrete/update",
            json={"prior": coin_prior, "likelihood": heads_likelihood},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["posterior"] == [1.0, 0.0]
        assert data["posterior_defined"] is True
        assert data["marginal_likelihood"] == {"value": 0.5, "display": "0.500"}
        assert data["surprisal"]["value"] == pytest.approx(1.0)
        assert data["surprisal"]["display"] == "1.00"
        assert data["kl"]["value"] == pytest.approx(1.0)
        assert data["r"]["display"] == "0.00"
        assert data["unit"] == "bits"
        assert data["dz"] is None

    @pytest.mark.asyncio
    async def test_zero_mass_uses_tokens(self, client):
        resp = await client.post(
            "/api/v1/discrete/update",
            json={"prior": [1.0, 0.0], "likelihood": [0.0, 1.0]},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["posterior"] is None
        assert data["posterior_defined"] is False
        assert data["surprisal"] == {"value": None, "display": "∞"}
        assert data["kl"] == {"value": None, "display": "undefined"}
        assert data["r"] == {"value": None, "display": "undefined"}

    @pytest.mark.asyncio
    async def test_nats(self, client, coin_prior, heads_likelihood):
        resp = await client.post(
            "/api/v1/discrete/update",
            json={"prior": coin_prior, "likelihood": heads_likelihood, "log_base": 2.718281828459045},
        )
        assert resp.json()["unit"] == "nats"

    @pytest.mark.asyncio
    async def test_length_mismatch(self, client):
        resp = await client.post(
            "/api/v1/discrete/update",
            json={"prior": [0.5, 0.5], "likelihood": [1.0]},
        )
        assert resp.status_code == 422
        error = resp.json()["error"]
        assert error["code"] == "E2000"
        assert error["message"] == "Prior and likelihood must have same length"
        assert error["details"] == {"prior_length": 2, "likelihood_length": 1}

    @pytest.mark.asyncio
    async def test_negative_probability_rejected(self, client):
        resp = await client.post(
            "/api/v1/discrete/update",
            json={"prior": [-0.5, 1.5], "likelihood": [1.0, 1.0]},
        )
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "E1001"

    @pytest.mark.asyncio
    async def test_log_base_one_rejected(self, client, coin_prior, heads_likelihood):
        resp = await client.post(
            "/api/v1/discrete/update",
            json={"prior": coin_prior, "likelihood": heads_likelihood, "log_base": 1},
        )
        assert resp.status_code == 422


class TestContinuousUpdate:
    @pytest.mark.asyncio
    async def test_flat_update(self, client):
        resp = await client.post(
            "/api/v1/continuous/update",
            json={"prior": [1.0, 1.0, 1.0], "likelihood": [0.5, 0.5, 0.5]},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["dz"] == 0.5
        assert data["marginal_likelihood"]["value"] == pytest.approx(0.5)
        assert data["posterior"] == pytest.approx([1.0, 1.0, 1.0])
        assert data["kl"]["value"] == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.asyncio
    async def test_custom_domain(self, client):
        resp = await client.post(
            "/api/v1/continuous/update",
            json={"prior": [0.25] * 5, "likelihood": [1.0] * 5, "domain": [0, 4]},
        )
        data = resp.json()
        assert data["dz"] == 1.0
        assert data["marginal_likelihood"]["value"] == pytest.approx(1.0)

    @pytest.mark.asyncio
    async def test_inverted_domain_rejected(self, client):
        resp = await client.post(
            "/api/v1/continuous/update",
            json={"prior": [1.0, 1.0], "likelihood": [1.0, 1.0], "domain": [1, 0]},
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_single_point_grid_rejected(self, client):
        resp = await client.post(
            "/api/v1/continuous/update",
            json={"prior": [1.0], "likelihood": [1.0]},
        )
        assert resp.status_code == 422


class TestResample:
    @pytest.mark.asyncio
    async def test_raw_values(self, client):
        resp = await client.post(
            "/api/v1/continuous/resample",
            json={"control_points": [0.0, 1.0], "point_count": 5, "normalize": False},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["xs"] == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])
        assert data["values"] == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])
        assert data["dz"] == 0.25

    @pytest.mark.asyncio
    async def test_normalized_density(self, client):
        resp = await client.post(
            "/api/v1/continuous/resample",
            json={"control_points": [0.0, 1.0], "point_count": 5},
        )
        assert resp.json()["values"] == pytest.approx([0.0, 0.5, 1.0, 1.5, 2.0])

    @pytest.mark.asyncio
    async def test_no_mass(self, client):
        resp = await client.post(
            "/api/v1/continuous/resample",
            json={"control_points": [0.0, 0.0, 0.0]},
        )
        assert resp.status_code == 200
        assert resp.json()["values"] is None

    @pytest.mark.asyncio
    async def test_point_count_limit(self, client):
        resp = await client.post(
            "/api/v1/continuous/resample",
            json={"control_points": [1.0, 1.0], "point_count": 10_000_000},
        )
        assert resp.status_code == 422


class TestInterpolate:
    @pytest.mark.asyncio
    async def test_linear(self, client):
        resp = await client.post(
            "/api/v1/interpolate",
            json={"xs": [0, 1, 2], "ys": [0, 1, 2], "eval_xs": [1.5, 0.5, -3]},
        )
        assert resp.status_code == 200
        assert resp.json()["values"] == pytest.approx([1.5, 0.5, 0.0])

    @pytest.mark.asyncio
    async def test_empty_control_points(self, client):
        resp = await client.post(
            "/api/v1/interpolate",
            json={"xs": [], "ys": [], "eval_xs": [0.1, 0.2]},
        )
        assert resp.json()["values"] == [0.0, 0.0]

    @pytest.mark.asyncio
    async def test_non_increasing_xs_rejected(self, client):
        resp = await client.post(
            "/api/v1/interpolate",
            json={"xs": [0, 1, 1], "ys": [0, 1, 2], "eval_xs": [0.5]},
        )
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "E1001"


class TestPresets:
    @pytest.mark.asyncio
    async def test_continuous_prior_catalog(self, client):
        resp = await client.get("/api/v1/presets/continuous/prior")
        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 6
        beta = next(p for p in data["presets"] if p["family"] == "beta")
        assert beta["default_params"] == {"alpha": 2.0, "beta": 5.0}
        assert [d["name"] for d in beta["param_defs"]] == ["alpha", "beta"]

    @pytest.mark.asyncio
    async def test_discrete_likelihood_catalog(self, client):
        resp = await client.get("/api/v1/presets/discrete/likelihood")
        names = [p["name"] for p in resp.json()["presets"]]
        assert names[0] == "Uniform (all 1)"
        assert "Discriminating" in names

    @pytest.mark.asyncio
    async def test_generate_beta(self, client):
        resp = await client.post(
            "/api/v1/presets/continuous/prior/beta",
            json={"point_count": 11, "params": {"alpha": 3}},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["params"] == {"alpha": 3.0, "beta": 5.0}
        assert data["domain"] == [0.0, 1.0]
        assert len(data["values"]) == 11
        assert data["values"][0] == 0.0

    @pytest.mark.asyncio
    async def test_unknown_family(self, client):
        resp = await client.post("/api/v1/presets/continuous/prior/nope", json={})
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "E3000"

    @pytest.mark.asyncio
    async def test_parameter_out_of_range(self, client):
        resp = await client.post(
            "/api/v1/presets/continuous/prior/beta",
            json={"params": {"alpha": 50}},
        )
        assert resp.status_code == 422
        error = resp.json()["error"]
        assert error["code"] == "E3001"
        assert error["details"]["parameter"] == "alpha"

    @pytest.mark.asyncio
    async def test_continuous_needs_two_points(self, client):
        resp = await client.post(
            "/api/v1/presets/continuous/likelihood/onepeak",
            json={"point_count": 1},
        )
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "E2001"

    @pytest.mark.asyncio
    async def test_seeded_generation_reproducible(self, client):
        body = {"point_count": 8, "seed": 7}
        first = await client.post("/api/v1/presets/discrete/prior/iid_uniform", json=body)
        second = await client.post("/api/v1/presets/discrete/prior/iid_uniform", json=body)
        assert first.json()["values"] == second.json()["values"]
        assert sum(first.json()["values"]) == pytest.approx(1.0)

    @pytest.mark.asyncio
    async def test_invalid_space(self, client):
        resp = await client.get("/api/v1/presets/spherical/prior")
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "E1001"


class TestUnhandledErrors:
    @pytest.mark.asyncio
    async def test_generic_500_envelope(self):
        app = create_app()

        @app.get("/boom")
        async def boom():
            raise RuntimeError("secret internals")

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            resp = await c.get("/boom")

        assert resp.status_code == 500
        error = resp.json()["error"]
        assert error["code"] == "E1000"
        assert "secret" not in error["message"]
        assert error["details"]["error_id"]


class TestNonFiniteInput:
    """JSON bodies may carry NaN / Infinity literals; they must be rejected."""

    @staticmethod
    async def _post_raw(client, path, body: str):
        return await client.post(path, content=body, headers={"Content-Type": "application/json"})

    @pytest.mark.asyncio
    async def test_nan_query_rejected(self, client):
        resp = await self._post_raw(
            client, "/api/v1/interpolate", '{"xs": [0, 1, 2], "ys": [0, 1, 2], "eval_xs": [NaN]}'
        )
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "E1001"

    @pytest.mark.asyncio
    async def test_nan_control_abscissa_rejected(self, client):
        resp = await self._post_raw(
            client, "/api/v1/interpolate", '{"xs": [0, NaN, 2], "ys": [0, 1, 2], "eval_xs": [0.5]}'
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_infinite_control_value_rejected(self, client):
        resp = await self._post_raw(
            client, "/api/v1/interpolate", '{"xs": [0, 1], "ys": [0, Infinity], "eval_xs": [0.5]}'
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    @pytest.mark.parametrize("log_base", ["Infinity", "NaN", "-Infinity"])
    async def test_non_finite_log_base_rejected(self, client, log_base):
        resp = await self._post_raw(
            client,
            "/api/v1/discrete/update",
            f'{{"prior": [0.5, 0.5], "likelihood": [1, 0], "log_base": {log_base}}}',
        )
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "E1001"

    @pytest.mark.asyncio
    async def test_non_finite_log_base_rejected_continuous(self, client):
        resp = await self._post_raw(
            client,
            "/api/v1/continuous/update",
            '{"prior": [1, 1], "likelihood": [1, 1], "log_base": NaN}',
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_nan_control_point_rejected(self, client):
        resp = await self._post_raw(
            client, "/api/v1/continuous/resample", '{"control_points": [0, NaN, 1]}'
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_infinite_domain_rejected(self, client):
        resp = await self._post_raw(
            client,
            "/api/v1/presets/continuous/prior/uniform",
            '{"point_count": 5, "domain": [0, Infinity]}',
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_nan_parameter_rejected(self, client):
        resp = await self._post_raw(
            client, "/api/v1/presets/continuous/prior/beta", '{"params": {"alpha": NaN}}'
        )
        assert resp.status_code == 422

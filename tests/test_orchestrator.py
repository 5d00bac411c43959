import unittest

from swapi_digest import swapi_client
from swapi_digest.config import Settings
from swapi_digest.orchestrator import Orchestrator
from fakes import FakeSession, full_routes, make_context, timeout_error

LUKE_JSON = '{"name":"Luke Skywalker","height":"172","mass":"77","birth_year":"19BBY","films":[1,2,3]}'


class TestOrchestrator(unittest.TestCase):
    def setUp(self):
        self._orig_session = swapi_client.session
        self.fake = FakeSession(full_routes())
        swapi_client.session = self.fake
        self.printed = []

    def tearDown(self):
        swapi_client.session = self._orig_session

    def _orchestrator(self, **ctx_overrides):
        return Orchestrator(make_context(**ctx_overrides), emit=self.printed.append)

    def test_full_run_output(self):
        orch = self._orchestrator()
        result = orch.run()

        self.assertTrue(result.ok)
        self.assertEqual(result.lines, self.printed)
        for expected in (
            "Character: Luke Skywalker",
            "Total Starships: 36",
            "Starship 3:",
            "Large populated planets:",
            "Coruscant - Pop: 1000000000000",
            "1. A New Hope (1977-05-25)",
            "3. Return of the Jedi (1983-05-25)",
            "Featured Vehicle:",
            "Name: Vehicle 1",
        ):
            self.assertIn(expected, self.printed)
        self.assertNotIn("Starship 4:", self.printed)
        self.assertFalse(any(line.startswith("Tatooine") for line in self.printed))
        self.assertNotIn("Stats:", self.printed)
        self.assertEqual(
            self.fake.paths(),
            ["people/1", "starships/?page=1", "planets/?page=1", "films/", "vehicles/1"],
        )

    def test_luke_end_to_end_bytes(self):
        # abort right after the character step so only its bytes are counted
        del self.fake.routes["starships/?page=1"]
        orch = self._orchestrator()

        result = orch.run()

        self.assertFalse(result.ok)
        self.assertEqual(self.printed, [
            "Character: Luke Skywalker",
            "Height: 172",
            "Mass: 77",
            "Birthday: 19BBY",
            "Appears in 3 films",
        ])
        self.assertEqual(orch.context.metrics.bytes, len(LUKE_JSON))

    def test_aborted_run_counts_fetch_error_and_run_error(self):
        del self.fake.routes["films/"]
        orch = self._orchestrator()

        result = orch.run()

        self.assertFalse(result.ok)
        self.assertIn("404", result.error)
        self.assertEqual(orch.context.metrics.errors, 2)
        self.assertEqual(orch.context.metrics.last_id, 1)
        self.assertIn("Total Starships: 36", self.printed)
        self.assertEqual(orch.context.cache.size(), 3)

    def test_timeout_aborts_run(self):
        self.fake.errors["planets/?page=1"] = timeout_error()
        orch = self._orchestrator()

        result = orch.run()

        self.assertFalse(result.ok)
        self.assertIn("timeout", result.error)
        self.assertEqual(orch.context.metrics.errors, 2)

    def test_vehicle_cycling(self):
        orch = self._orchestrator()

        fetched = [orch.run().vehicle_id for _ in range(5)]

        self.assertEqual(fetched, [1, 2, 3, 4, None])
        vehicle_paths = [p for p in self.fake.paths() if p.startswith("vehicles/")]
        self.assertEqual(vehicle_paths, ["vehicles/1", "vehicles/2", "vehicles/3", "vehicles/4"])
        self.assertIn("people/5", self.fake.paths())
        self.assertEqual(orch.context.metrics.requests, 5)

    def test_failed_vehicle_fetch_reports_no_vehicle(self):
        del self.fake.routes["vehicles/1"]
        orch = self._orchestrator()

        result = orch.run()

        self.assertFalse(result.ok)
        self.assertIsNone(result.vehicle_id)
        self.assertNotIn("Featured Vehicle:", self.printed)
        self.assertEqual(orch.context.metrics.last_id, 1)

    def test_repeat_runs_hit_cache_but_still_count_bytes(self):
        orch = self._orchestrator()
        orch.run()
        first_bytes = orch.context.metrics.bytes
        calls_after_first = len(self.fake.calls)

        orch.run()

        # only people/2 and vehicles/2 are new
        self.assertEqual(len(self.fake.calls), calls_after_first + 2)
        self.assertGreater(orch.context.metrics.bytes, first_bytes)

    def test_debug_prints_stats_block(self):
        orch = self._orchestrator(debug=True)
        orch.run()

        idx = self.printed.index("Stats:")
        self.assertEqual(self.printed[idx + 1:idx + 5], [
            "API Calls: 1",
            "Cache Size: 5",
            f"Total Data Size: {orch.context.metrics.bytes} bytes",
            "Error Count: 0",
        ])

    def test_unexpected_payload_shape_is_contained(self):
        self.fake.routes["films/"] = {"count": 0}
        orch = self._orchestrator()

        result = orch.run()

        self.assertFalse(result.ok)
        self.assertEqual(orch.context.metrics.errors, 1)

    def test_from_settings(self):
        s = Settings(base_url="https://swapi.test/api", timeout_ms=1234, debug=False,
                     omit_falsy_fields=False)
        orch = Orchestrator.from_settings(s, emit=self.printed.append)
        self.assertEqual(orch.context.base_url, "https://swapi.test/api/")
        self.assertEqual(orch.context.timeout_ms, 1234)
        self.assertFalse(orch.omit_falsy_fields)
        self.assertTrue(orch.run().ok)


if __name__ == "__main__":
    unittest.main()

import json
import sys
from pathlib import Path
from types import SimpleNamespace
import unittest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from openai import OpenAIError  # noqa: E402

from ai.game_master import (  # noqa: E402
    INIT_MESSAGE,
    RESPONSE_SCHEMA,
    ClassroomGameMaster,
    NotStartedError,
    ServiceError,
    parse_response,
)


def payload(narrative="Day one.", motivation=50, authority=80, energy=100, **extra):
    body = {
        "narrative": narrative,
        "stats": {"motivation": motivation, "authority": authority, "energy": energy},
        "choices": ["Teach calmly", "Crack a joke", "Give a pop quiz"],
        "gameOver": False,
        "victory": False,
        "reason": None,
    }
    body.update(extra)
    return body


def api_response(text, response_id):
    part = SimpleNamespace(type="output_text", text=text)
    return SimpleNamespace(id=response_id, output=[SimpleNamespace(type="message", content=[part])])


class _Responses:
    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return api_response(reply, f"resp_{len(self.calls)}")


class FakeClient:
    def __init__(self, *replies):
        self.responses = _Responses([json.dumps(r) if isinstance(r, dict) else r for r in replies])

    @property
    def calls(self):
        return self.responses.calls


class TestStartGame(unittest.TestCase):
    def test_start_game_returns_parsed_response(self):
        client = FakeClient(payload())
        gm = ClassroomGameMaster(client, model="test-model")

        resp = gm.start_game()

        self.assertEqual(resp.narrative, "Day one.")
        self.assertEqual(resp.stats.motivation, 50)
        self.assertEqual(resp.stats.authority, 80)
        self.assertEqual(resp.stats.energy, 100)
        self.assertEqual(resp.choices, ["Teach calmly", "Crack a joke", "Give a pop quiz"])
        self.assertFalse(resp.game_over)
        self.assertIsNone(resp.reason)
        self.assertTrue(gm.has_session)

    def test_start_game_sends_rules_schema_and_opening_message(self):
        client = FakeClient(payload())
        ClassroomGameMaster(client, model="test-model").start_game()

        call = client.calls[0]
        self.assertEqual(call["model"], "test-model")
        self.assertIn("Profesor.exe", call["instructions"])
        self.assertEqual(call["input"], [{"role": "user", "content": INIT_MESSAGE}])
        fmt = call["text"]["format"]
        self.assertEqual(fmt["type"], "json_schema")
        self.assertTrue(fmt["strict"])
        self.assertIs(fmt["schema"], RESPONSE_SCHEMA)
        self.assertNotIn("previous_response_id", call)

    def test_empty_reply_is_service_error_and_no_session(self):
        gm = ClassroomGameMaster(FakeClient(""))
        with self.assertRaises(ServiceError):
            gm.start_game()
        self.assertFalse(gm.has_session)

    def test_transport_error_is_wrapped(self):
        gm = ClassroomGameMaster(FakeClient(OpenAIError("connection reset")))
        with self.assertRaises(ServiceError) as ctx:
            gm.start_game()
        self.assertIsInstance(ctx.exception.__cause__, OpenAIError)

    def test_failed_restart_keeps_previous_session(self):
        client = FakeClient(payload(), "not json", payload(narrative="Still here."))
        gm = ClassroomGameMaster(client)
        gm.start_game()
        with self.assertRaises(ServiceError):
            gm.start_game()

        resp = gm.send_action("Teach calmly")

        self.assertEqual(resp.narrative, "Still here.")
        self.assertEqual(client.calls[2]["previous_response_id"], "resp_1")

    def test_restart_replaces_session(self):
        client = FakeClient(payload(), payload(narrative="Fresh start."), payload(narrative="Next."))
        gm = ClassroomGameMaster(client)
        gm.start_game()
        gm.start_game()
        gm.send_action("Crack a joke")
        self.assertNotIn("previous_response_id", client.calls[1])
        self.assertEqual(client.calls[2]["previous_response_id"], "resp_2")


class TestSendAction(unittest.TestCase):
    def test_send_action_before_start_never_calls_service(self):
        client = FakeClient(payload())
        gm = ClassroomGameMaster(client)
        with self.assertRaises(NotStartedError):
            gm.send_action("Give a pop quiz")
        self.assertEqual(client.calls, [])

    def test_send_action_continues_same_session(self):
        client = FakeClient(
            payload(),
            payload(narrative="Students panic.", motivation=20),
            payload(narrative="They recover.", motivation=35),
        )
        gm = ClassroomGameMaster(client)
        gm.start_game()

        first = gm.send_action("Give a pop quiz")
        second = gm.send_action("Hand out coffee")

        self.assertEqual(first.narrative, "Students panic.")
        self.assertEqual(first.stats.motivation, 20)
        self.assertEqual(second.stats.motivation, 35)
        self.assertEqual(client.calls[1]["input"], [{"role": "user", "content": "Give a pop quiz"}])
        self.assertEqual(client.calls[1]["previous_response_id"], "resp_1")
        self.assertEqual(client.calls[2]["previous_response_id"], "resp_2")
        # Instructions are re-sent with every chained turn.
        self.assertEqual(client.calls[2]["instructions"], client.calls[0]["instructions"])

    def test_unparseable_action_reply(self):
        gm = ClassroomGameMaster(FakeClient(payload(), "```json\n{}\n```"))
        gm.start_game()
        with self.assertRaises(ServiceError):
            gm.send_action("Give a pop quiz")


class TestParseResponse(unittest.TestCase):
    def test_rejects_coerced_numbers(self):
        body = payload()
        body["stats"]["motivation"] = "50"
        with self.assertRaises(ServiceError):
            parse_response(json.dumps(body))

    def test_rejects_missing_field(self):
        body = payload()
        del body["victory"]
        with self.assertRaises(ServiceError):
            parse_response(json.dumps(body))

    def test_rejects_unknown_field(self):
        with self.assertRaises(ServiceError):
            parse_response(json.dumps(payload(mood="grumpy")))

    def test_rejects_snake_case_game_over(self):
        body = payload()
        del body["gameOver"]
        body["game_over"] = True
        with self.assertRaises(ServiceError):
            parse_response(json.dumps(body))

    def test_rejects_both_game_over_spellings(self):
        with self.assertRaises(ServiceError):
            parse_response(json.dumps(payload(game_over=True)))

    def test_reason_may_be_absent(self):
        body = payload(gameOver=True)
        del body["reason"]
        resp = parse_response(json.dumps(body))
        self.assertTrue(resp.game_over)
        self.assertIsNone(resp.reason)

    def test_out_of_range_stats_are_kept_as_sent(self):
        resp = parse_response(json.dumps(payload(motivation=-10, energy=140)))
        self.assertEqual(resp.stats.motivation, -10)
        self.assertEqual(resp.stats.energy, 140)


if __name__ == "__main__":
    unittest.main()

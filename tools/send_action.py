import json
import sys
from urllib import request

API = "http://localhost:8000/step"

ACTIONS = [
    "start",
    "act",
    "choice",
    "reveal_done",
    "state",
]


def prompt(msg, default=None):
    val = input(f"{msg} " + (f"[{default}] " if default else "")) or default
    return val


def build_payload(action):
    payload = {"action": action}
    if action == "act":
        payload["text"] = prompt("Action text", "Give a pop quiz")
    elif action == "choice":
        payload["choice"] = int(prompt("Choice (0-based)", "0"))
    return payload


def post(session_id, payload):
    body = json.dumps({"session_id": session_id, **payload}).encode("utf-8")
    req = request.Request(API, data=body, headers={"Content-Type": "application/json"})
    with request.urlopen(req) as resp:
        return json.loads(resp.read().decode("utf-8"))


def main():
    session_id = prompt("Session ID", "test-session")
    while True:
        print("Choose action:")
        for idx, a in enumerate(ACTIONS, 1):
            print(f"{idx}. {a}")
        raw = prompt("Number (blank to quit)")
        if not raw:
            break
        try:
            action = ACTIONS[int(raw) - 1]
            payload = build_payload(action)
        except (ValueError, IndexError):
            print("Invalid selection")
            continue
        try:
            events = post(session_id, payload)
        except Exception as e:
            print("Error sending action:", e)
            sys.exit(1)
        for ev in events:
            print(json.dumps(ev, ensure_ascii=False))


if __name__ == "__main__":
    main()

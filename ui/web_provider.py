from engine.markup import render_html
from ui.events import build_choices, build_stats_update, build_status
from ui.provider import UIProvider


class WebProvider(UIProvider):
    is_blocking = False

    def __init__(self, session):
        self.session = session

    def scene(self, text, data=None):
        self.session.emit({"type": "scene", "text": text, "data": data})

    def narration(self, text, data=None):
        self.session.emit({"type": "narration", "text": text, "html": render_html(text), "data": data})

    def player(self, text, data=None):
        self.session.emit({"type": "player", "text": text, "data": data})

    def stats(self, stats, data=None):
        self.session.emit(build_stats_update(stats))

    def choices(self, options, data=None):
        self.session.emit(build_choices(options))

    def status(self, status, data=None):
        self.session.emit(build_status(status, (data or {}).get("reason")))

    def loading(self, active):
        self.session.emit({"type": "loading", "active": active})

    def system(self, text, data=None):
        self.session.emit({"type": "system", "text": text, "data": data})

    def error(self, text, data=None):
        self.session.emit({"type": "error", "text": text, "data": data})

    def notice(self, text, data=None):
        self.session.emit({"type": "notice", "text": text, "blocking": True, "data": data})

    def choice(self, prompt, options, data=None):
        self.session.emit({
            "type": "choice",
            "prompt": prompt,
            "options": options
        })
        return None

    def text_input(self, prompt, data=None):
        self.session.emit({
            "type": "input",
            "prompt": prompt
        })
        return None

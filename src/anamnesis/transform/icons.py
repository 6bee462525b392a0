"""Lucide icons shown in expanded callouts."""


def _svg(body: str, name: str) -> str:
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" '
        'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
        f'stroke-linecap="round" stroke-linejoin="round" class="svg-icon lucide-{name}">'
        f"{body}</svg>"
    )


PENCIL = _svg('<path d="M17 3a2.85 2.83 0 1 1 4 4L7.5 20.5 2 22l1.5-5.5Z"/>'
              '<path d="m15 5 4 4"/>', "pencil")
CLIPBOARD_LIST = _svg('<rect width="8" height="4" x="8" y="2" rx="1" ry="1"/>'
                      '<path d="M16 4h2a2 2 0 0 1 2 2v14a2 2 0 0 1-2 2H6a2 2 0 0 1-2-2V6a2 2 0 0 1 2-2h2"/>'
                      '<path d="M12 11h4"/><path d="M12 16h4"/><path d="M8 11h.01"/>'
                      '<path d="M8 16h.01"/>', "clipboard-list")
INFO = _svg('<circle cx="12" cy="12" r="10"/><path d="M12 16v-4"/>'
            '<path d="M12 8h.01"/>', "info")
CHECK_CIRCLE_2 = _svg('<circle cx="12" cy="12" r="10"/><path d="m9 12 2 2 4-4"/>',
                      "check-circle-2")
FLAME = _svg('<path d="M8.5 14.5A2.5 2.5 0 0 0 11 12c0-1.38-.5-2-1-3-1.072-2.143-.224-4.054 '
             '2-6 .5 2.5 2 4.9 4 6.5 2 1.6 3 3.5 3 5.5a7 7 0 1 1-14 0c0-1.153.433-2.294 '
             '1-3a2.5 2.5 0 0 0 2.5 2.5z"/>', "flame")
CHECK = _svg('<path d="M20 6 9 17l-5-5"/>', "check")
HELP_CIRCLE = _svg('<circle cx="12" cy="12" r="10"/><path d="M9.09 9a3 3 0 0 1 5.83 1c0 2-3 3-3 3"/>'
                   '<path d="M12 17h.01"/>', "help-circle")
ALERT_TRIANGLE = _svg('<path d="m21.73 18-8-14a2 2 0 0 0-3.48 0l-8 14A2 2 0 0 0 4 21h16a2 2 0 0 0 1.73-3Z"/>'
                      '<path d="M12 9v4"/><path d="M12 17h.01"/>', "alert-triangle")
X = _svg('<path d="M18 6 6 18"/><path d="m6 6 12 12"/>', "x")
ZAP = _svg('<polygon points="13 2 3 14 12 14 11 22 21 10 12 10 13 2"/>', "zap")
BUG = _svg('<path d="m8 2 1.88 1.88"/><path d="M14.12 3.88 16 2"/>'
           '<path d="M9 7.13v-1a3.003 3.003 0 1 1 6 0v1"/>'
           '<path d="M12 20c-3.3 0-6-2.7-6-6v-3a4 4 0 0 1 4-4h4a4 4 0 0 1 4 4v3c0 3.3-2.7 6-6 6"/>'
           '<path d="M12 20v-9"/>', "bug")
LIST = _svg('<line x1="8" x2="21" y1="6" y2="6"/><line x1="8" x2="21" y1="12" y2="12"/>'
            '<line x1="8" x2="21" y1="18" y2="18"/><line x1="3" x2="3.01" y1="6" y2="6"/>'
            '<line x1="3" x2="3.01" y1="12" y2="12"/><line x1="3" x2="3.01" y1="18" y2="18"/>',
            "list")
QUOTE = _svg('<path d="M3 21c3 0 7-1 7-8V5c0-1.25-.756-2.017-2-2H4c-1.25 0-2 .75-2 1.972V11c0 '
             '1.25.75 2 2 2 1 0 1 0 1 1v1c0 1-1 2-2 2s-1 .008-1 1.031V20c0 1 0 1 1 1z"/>',
             "quote")
CHEVRON_DOWN = _svg('<polyline points="6 9 12 15 18 9"/>', "chevron-down")

CALLOUT_ICONS = {
    "note": PENCIL,

    "abstract": CLIPBOARD_LIST,
    "summary": CLIPBOARD_LIST,
    "tldr": CLIPBOARD_LIST,

    "info": INFO,

    "todo": CHECK_CIRCLE_2,

    "tip": FLAME,
    "hint": FLAME,
    "important": FLAME,

    "success": CHECK,
    "check": CHECK,
    "done": CHECK,

    "question": HELP_CIRCLE,
    "help": HELP_CIRCLE,
    "faq": HELP_CIRCLE,

    "warning": ALERT_TRIANGLE,
    "caution": ALERT_TRIANGLE,
    "attention": ALERT_TRIANGLE,

    "failure": X,
    "fail": X,
    "missing": X,

    "danger": ZAP,
    "error": ZAP,

    "bug": BUG,

    "example": LIST,

    "quote": QUOTE,
    "cite": QUOTE,
}

DEFAULT_ICON = INFO

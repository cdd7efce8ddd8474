from __future__ import annotations

import argparse
from typing import List, Optional

from .bootstrap import load_index
from .chat import respond
from .config import get_settings
from .formatting import quick_actions
from .models import Action, AgentResult, MenuIndex
from .phrases import WELCOME_TEXT

_EXIT_WORDS = {"quit", "exit"}


def render_reply(result: AgentResult) -> str:
    """
    Text, then the notice, then the suggested follow-ups (numbered so they can be picked).
    """
    parts = [result.text]
    if result.notice:
        parts.append(result.notice)
    if result.actions:
        parts.append(render_actions(result.actions))
    return "\n\n".join(parts)


def render_actions(actions: List[Action]) -> str:
    tips = "\n".join(f"• [{i}] {a.label}" for i, a in enumerate(actions, start=1))
    return f"You can also try:\n{tips}"


def resolve_input(line: str, actions: List[Action]) -> str:
    """A bare number picks that suggested action's value."""
    s = line.strip()
    if s.isdigit() and 1 <= int(s) <= len(actions):
        return actions[int(s) - 1].value
    return s


def run_chat(index: MenuIndex, *, question: Optional[str] = None, debug: bool = False) -> int:
    if question is not None:
        print(render_reply(respond(question, index, debug=debug)))
        return 0

    actions = quick_actions()
    print(WELCOME_TEXT)
    print()
    print(render_actions(actions))
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        if not line.strip():
            continue
        if line.strip().lower() in _EXIT_WORDS:
            break
        message = resolve_input(line, actions)
        if message.startswith("http://") or message.startswith("https://"):
            print(f"Open: {message}")
            continue
        result = respond(message, index, debug=debug)
        actions = list(result.actions or [])
        print(render_reply(result))
    return 0


def _serve(host: str, port: int) -> int:
    import uvicorn

    uvicorn.run("menu_assistant.server:app", host=host, port=port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()

    p = argparse.ArgumentParser(prog="menu-assistant", description="Menu assistant: chat, serve, or export the menu.")
    sub = p.add_subparsers(dest="command", required=True)

    chat_p = sub.add_parser("chat", help="Chat in the terminal")
    chat_p.add_argument("--menu", default=settings.menu_path, help=f"Menu dataset path (default: {settings.menu_path})")
    chat_p.add_argument("-q", "--question", default=None, help="Ask one question and exit")
    chat_p.add_argument("--debug", action="store_true", default=settings.debug_trace, help="Trace routing to stderr")

    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", default=settings.host)
    serve_p.add_argument("--port", type=int, default=settings.port)

    export_p = sub.add_parser("export", help="Export menu views (CSV/JSONL/summary)")
    export_p.add_argument("--menu", default=settings.menu_path)
    export_p.add_argument("--out", default="out", help="Output directory (default: out/)")

    args = p.parse_args(argv)

    if args.command == "chat":
        index = load_index(args.menu, debug=args.debug)
        return run_chat(index, question=args.question, debug=args.debug)

    if args.command == "serve":
        return _serve(args.host, args.port)

    from .export import export_all

    export_all(inp=args.menu, out_dir=args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

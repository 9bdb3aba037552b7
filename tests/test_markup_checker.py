from __future__ import annotations

from baseline_checker.checkers import MarkupChecker


def test_inline_script_lines_map_to_document(knowledge_base) -> None:
    html = "<script>\ndocument.execCommand('copy');\n</script>"
    issues = MarkupChecker(knowledge_base).scan(html, file_path="index.html")
    assert [(i.api, i.line) for i in issues] == [("document.execCommand", 2)]
    assert issues[0].file_path == "index.html"


def test_multiple_blocks_keep_their_offsets(knowledge_base) -> None:
    html = "\n".join(
        [
            "<html>",
            "<head><script>",
            "document.execCommand('copy');",
            "</script></head>",
            "",
            "",
            "<body><script>",
            "",
            "webkitRequestAnimationFrame(draw);",
            "</script></body>",
            "</html>",
        ]
    )
    issues = MarkupChecker(knowledge_base).scan(html)
    assert [(i.api, i.line) for i in issues] == [
        ("document.execCommand", 3),
        ("webkitRequestAnimationFrame", 9),
    ]


def test_script_tags_match_case_insensitively(knowledge_base) -> None:
    html = '<p>hi</p>\n<SCRIPT type="text/javascript">new webkitAudioContext();</SCRIPT>'
    issues = MarkupChecker(knowledge_base).scan(html)
    assert [(i.api, i.line) for i in issues] == [("webkitAudioContext", 2)]


def test_markup_outside_scripts_is_ignored(knowledge_base) -> None:
    html = "<p>document.execCommand is deprecated</p>\n<script src=\"app.js\"></script>"
    assert MarkupChecker(knowledge_base).scan(html) == []


def test_malformed_block_uses_fallback(knowledge_base) -> None:
    html = "<div>\n</div>\n<script>\nif ( { webkitURL\n</script>"
    issues = MarkupChecker(knowledge_base).scan(html)
    assert [(i.api, i.line) for i in issues] == [("webkitURL", 4)]

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from app.services import CheckerService

HEAVY = "document.execCommand('copy');\n" * 200
LIGHT = "new webkitAudioContext();\n"


def test_concurrent_scans_do_not_share_issues(knowledge_base) -> None:
    svc = CheckerService(knowledge_base)

    def scan(job):
        code, filename = job
        return filename, svc.analyze_code(code, filename=filename)

    jobs = [(HEAVY, "heavy.js"), (LIGHT, "light.js")] * 20
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(scan, jobs))

    for filename, result in results:
        apis = {i.api for i in result.issues}
        paths = {i.file_path for i in result.issues}
        assert paths == {filename}
        if filename == "heavy.js":
            assert apis == {"document.execCommand"}
            assert len(result.issues) == 200
        else:
            assert apis == {"webkitAudioContext"}
            assert len(result.issues) == 1


def test_analyze_path_scans_htm(knowledge_base, tmp_path) -> None:
    (tmp_path / "legacy.htm").write_text("<p></p>\n<script>new webkitURL(href);</script>", encoding="utf-8")
    result = CheckerService(knowledge_base).analyze_path(tmp_path)
    assert result.files_scanned == 1
    assert [(i.api, i.line) for i in result.issues] == [("webkitURL", 2)]

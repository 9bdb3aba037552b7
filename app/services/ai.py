"""AI service: OpenAI-compatible chat completions for replacement suggestions."""

from ..config import get_ai_api_key, get_ai_base_url, get_ai_model, get_ai_timeout
from deps import Any, Dict, List, OpenAI, Optional, json, logging, re

from baseline_checker.issue import AISuggestion, Issue

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful web development assistant focused on modern web standards "
    "and browser compatibility. Always respond with valid JSON."
)

PROMPT_TEMPLATE = """You are a web development expert specializing in browser compatibility and modern web standards.

API: {api}
Code Context: {context}

This API is either deprecated or not part of the Baseline web platform. Please provide a JSON response with:
1. "alternative": A modern, Baseline-supported alternative
2. "explanation": Brief explanation of why the original API should be avoided
3. "codeExample": A practical code example showing the replacement
4. "browserSupport": Browser support information for the suggested alternative

Keep the response concise and practical for developers. Format as valid JSON."""

# Placeholder per field when a reply does not provide it.
PLACEHOLDERS = {
    "alternative": "Modern alternative available",
    "explanation": "This API has compatibility issues",
    "codeExample": "// See documentation for examples",
    "browserSupport": "Check MDN for browser support",
}

FALLBACK_SUGGESTIONS: Dict[str, AISuggestion] = {
    "document.execCommand": AISuggestion(
        alternative="Clipboard API",
        explanation=(
            "document.execCommand is deprecated and unreliable across browsers. The Clipboard API "
            "provides a modern, secure, and promise-based alternative."
        ),
        code_example=(
            "// Instead of: document.execCommand('copy')\n"
            "// Use:\n"
            "await navigator.clipboard.writeText(textToCopy);\n"
            "\n"
            "// For reading:\n"
            "const text = await navigator.clipboard.readText();"
        ),
        browser_support="Supported in Chrome 66+, Firefox 63+, Safari 13.1+",
    ),
    "webkitRequestAnimationFrame": AISuggestion(
        alternative="requestAnimationFrame",
        explanation=(
            "Vendor-prefixed APIs are no longer needed. The standard requestAnimationFrame is "
            "universally supported."
        ),
        code_example=(
            "// Instead of: webkitRequestAnimationFrame(callback)\n"
            "// Use:\n"
            "requestAnimationFrame(callback);"
        ),
        browser_support="Universally supported in all modern browsers",
    ),
    "mozRequestAnimationFrame": AISuggestion(
        alternative="requestAnimationFrame",
        explanation=(
            "Vendor-prefixed APIs are no longer needed. The standard requestAnimationFrame is "
            "universally supported."
        ),
        code_example=(
            "// Instead of: mozRequestAnimationFrame(callback)\n"
            "// Use:\n"
            "requestAnimationFrame(callback);"
        ),
        browser_support="Universally supported in all modern browsers",
    ),
    "webkitGetUserMedia": AISuggestion(
        alternative="navigator.mediaDevices.getUserMedia",
        explanation="Legacy getUserMedia is deprecated. The modern API is promise-based and more secure.",
        code_example=(
            "// Instead of: navigator.webkitGetUserMedia(constraints, success, error)\n"
            "// Use:\n"
            "try {\n"
            "  const stream = await navigator.mediaDevices.getUserMedia(constraints);\n"
            "  // Handle stream\n"
            "} catch (error) {\n"
            "  // Handle error\n"
            "}"
        ),
        browser_support="Supported in all modern browsers with HTTPS requirement",
    ),
    "webkitURL": AISuggestion(
        alternative="URL",
        explanation="The vendor-prefixed URL constructor is deprecated. Use the standard URL constructor.",
        code_example=(
            "// Instead of: new webkitURL(url, base)\n"
            "// Use:\n"
            "new URL(url, base);"
        ),
        browser_support="Universally supported in modern browsers",
    ),
    "webkitAudioContext": AISuggestion(
        alternative="AudioContext",
        explanation="Vendor-prefixed AudioContext is deprecated. Use the standard AudioContext.",
        code_example=(
            "// Instead of: new webkitAudioContext()\n"
            "// Use:\n"
            "new AudioContext();"
        ),
        browser_support="Supported in all modern browsers",
    ),
}

GENERIC_SUGGESTION = AISuggestion(
    alternative="Modern alternative",
    explanation=(
        "This API may have compatibility issues or be deprecated. Check MDN Web Docs for modern "
        "alternatives."
    ),
    code_example="// Check MDN documentation for modern alternatives and examples",
    browser_support="Varies - check browser compatibility tables on MDN",
)

_NUMBERED_ITEM = re.compile(r"^\d+\.")


def _client() -> Optional[Any]:
    """Return an OpenAI-compatible client, or None if no API key is configured."""
    key = get_ai_api_key()
    if not key:
        return None
    return OpenAI(
        api_key=key,
        base_url=get_ai_base_url(),
        timeout=get_ai_timeout(),
        max_retries=0,
    )


def fallback_suggestion(api: str) -> AISuggestion:
    """Static suggestion for a curated API, or a generic one."""
    return FALLBACK_SUGGESTIONS.get(api, GENERIC_SUGGESTION)


def _strip_code_fence(text: str) -> str:
    """Strip a surrounding markdown code block if present."""
    text = text.strip()
    if text.startswith("```"):
        lines = text.split("\n")
        if lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        text = "\n".join(lines)
    return text


def extract_section(text: str, section: str) -> str:
    """Collect the lines following the line that names ``section``.

    Stops at a blank line, a numbered-list item or any line containing a colon.
    """
    capturing = False
    result: List[str] = []
    for line in text.split("\n"):
        if section.lower() in line.lower():
            capturing = True
            continue
        if capturing:
            if line.strip() == "" or _NUMBERED_ITEM.match(line) or ":" in line:
                break
            result.append(line)
    return "\n".join(result).strip()


def parse_ai_response(response: str) -> AISuggestion:
    """Parse a reply as a JSON object, or else as free text with labeled sections."""
    fields: Dict[str, str] = {}
    try:
        parsed = json.loads(_strip_code_fence(response))
    except ValueError:
        parsed = None
    if isinstance(parsed, dict):
        for key in PLACEHOLDERS:
            value = parsed.get(key)
            if isinstance(value, str):
                fields[key] = value
    else:
        for key in PLACEHOLDERS:
            fields[key] = extract_section(response, key)
    return AISuggestion(
        alternative=fields.get("alternative") or PLACEHOLDERS["alternative"],
        explanation=fields.get("explanation") or PLACEHOLDERS["explanation"],
        code_example=fields.get("codeExample") or PLACEHOLDERS["codeExample"],
        browser_support=fields.get("browserSupport") or PLACEHOLDERS["browserSupport"],
    )


class AIService:
    """Best-effort replacement suggestions with a static fallback."""

    def get_suggestion(self, api: str, context: str) -> AISuggestion:
        """Return a suggestion for ``api``. Never raises."""
        client = _client()
        if not client:
            return fallback_suggestion(api)
        prompt = PROMPT_TEMPLATE.format(api=api, context=context)
        try:
            r = client.chat.completions.create(
                model=get_ai_model(),
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=500,
                temperature=0.3,
            )
            content = r.choices[0].message.content if r.choices else None
        except Exception as e:
            logger.warning("Error getting AI suggestion for %s: %s", api, e)
            return fallback_suggestion(api)
        if not content or not content.strip():
            logger.warning("Empty AI suggestion for %s; using fallback", api)
            return fallback_suggestion(api)
        return parse_ai_response(content)

    def enrich(self, issues: List[Issue]) -> List[Issue]:
        """Attach a suggestion to every issue, one call at a time, after scanning."""
        for issue in issues:
            issue.ai_suggestion = self.get_suggestion(issue.api, issue.context)
        return issues

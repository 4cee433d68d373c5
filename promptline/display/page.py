# display/page.py

from html import escape

from ..transformer.state import TransformerState, View
from .style import HEADING, INTRO, RESULT_TITLE, TITLE

FOOTER = "&copy; 2023 Prompt Engineer. All rights reserved."

_STYLES = """
body { margin: 0; font-family: system-ui, sans-serif; min-height: 100vh; display: flex; flex-direction: column; }
header, footer { background: #2563eb; color: #fff; padding: 1rem; }
footer { text-align: center; }
main { flex-grow: 1; background: linear-gradient(135deg, #f3e8ff, #c7d2fe); padding: 2rem 1rem; }
.card { max-width: 56rem; margin: 0 auto 2rem; background: #fff; border-radius: .75rem; padding: 1.5rem; box-shadow: 0 4px 12px rgba(0,0,0,.1); }
h2 { color: #4338ca; }
textarea { width: 100%; box-sizing: border-box; padding: .5rem .75rem; border-radius: .5rem; }
button { width: 100%; margin-top: 1rem; background: #4f46e5; color: #fff; border: 0; padding: .5rem 1rem; border-radius: .5rem; cursor: pointer; }
button:disabled { opacity: .7; cursor: wait; }
.error { margin-top: 1rem; padding: .75rem; background: #fee2e2; border: 1px solid #f87171; color: #b91c1c; border-radius: .5rem; }
.result { margin-top: 2rem; background: #eef2ff; border-radius: .5rem; padding: 1rem; }
.result p { white-space: pre-wrap; }
"""

# Disables the submit control while the request is in flight and resets the
# copy confirmation after COPY_RESET_MS, restarting the timer on every copy.
_SCRIPT = """
const COPY_RESET_MS = %(copy_reset_ms)d;
const form = document.getElementById("prompt-form");
form.addEventListener("submit", (event) => {
  if (!form.userPrompt.value.trim()) { event.preventDefault(); return; }
  const button = document.getElementById("submit-button");
  button.disabled = true;
  button.textContent = "Processing...";
});
const copyButton = document.getElementById("copy-button");
if (copyButton) {
  let resetTimer = null;
  copyButton.addEventListener("click", () => {
    const text = document.getElementById("transformed-prompt").textContent;
    navigator.clipboard.writeText(text).then(() => {
      copyButton.textContent = "Copied!";
      clearTimeout(resetTimer);
      resetTimer = setTimeout(() => { copyButton.textContent = "Copy to Clipboard"; }, COPY_RESET_MS);
    }, (err) => console.error("Copy failed:", err));
  });
}
"""


def _error_panel(message: str) -> str:
    return f'<div class="error" role="alert"><p>{escape(message)}</p></div>'


def _result_panel(text: str) -> str:
    return (
        '<div class="result">'
        f'<h2>{escape(RESULT_TITLE)}</h2>'
        f'<p id="transformed-prompt">{escape(text)}</p>'
        '<button type="button" id="copy-button">Copy to Clipboard</button>'
        '</div>'
    )


def render_page(state: TransformerState, copy_reset_delay: float = 2.0) -> str:
    """Render the whole page for a state: form always, plus the error or result panel."""
    view = state.view
    loading = view is View.LOADING
    panel = ""
    if view is View.ERROR:
        panel = _error_panel(state.error or "")
    elif view is View.SUCCESS:
        panel = _result_panel(state.transformed_text)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{TITLE}</title>
<style>{_STYLES}</style>
</head>
<body>
<header><h1>{TITLE}</h1></header>
<main>
<section class="card">
<h2>{HEADING}</h2>
<p>{escape(INTRO)}</p>
</section>
<section class="card">
<form id="prompt-form" method="post" action="/">
<label for="userPrompt">Your Prompt</label>
<textarea id="userPrompt" name="prompt" rows="4" placeholder="Enter your prompt here..." required>{escape(state.input_text)}</textarea>
<button type="submit" id="submit-button"{" disabled" if loading else ""}>{"Processing..." if loading else "Transform"}</button>
</form>
{panel}
</section>
</main>
<footer><p>{FOOTER}</p></footer>
<script>{_SCRIPT % {"copy_reset_ms": int(copy_reset_delay * 1000)}}</script>
</body>
</html>
"""

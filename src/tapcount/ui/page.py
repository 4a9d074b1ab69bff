"""
Click Counter Page

A single self-contained document: inline styles and script, no external
assets. The script talks to ``/api/count`` and ``/api/increment``.
"""

from fastcore.xml import ft, to_xml
from fasthtml.common import Body, Button, Code, Div, H1, Head, Main, Meta, P, Script, Style, Title

PAGE_TITLE = "Click Counter"

PAGE_CSS = """
  :root { --maxw: 540px; }
  * { box-sizing: border-box; }
  body {
    margin: 0; min-height: 100vh; display: flex; align-items: center; justify-content: center;
    font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif;
    background: radial-gradient(circle at 20% 20%, #f8f9ff, #eef1ff 40%, #e7ecff);
  }
  .card {
    width: min(92vw, var(--maxw));
    background: #fff; border: 1px solid #e6e8f0; border-radius: 16px;
    box-shadow: 0 10px 30px rgba(16,24,40,.08);
    padding: 24px; text-align: center;
  }
  h1 { margin: 0 0 8px; font-size: clamp(20px, 4vw, 28px); }
  p.hint { margin: 0 0 16px; color: #475467; font-size: 14px; }
  .count {
    font-size: clamp(40px, 12vw, 72px);
    font-weight: 800; line-height: 1; margin: 6px 0 16px; color: #0a2e5c;
  }
  button#tap {
    border: 0; padding: 14px 22px; border-radius: 12px; cursor: pointer;
    font-size: clamp(16px, 4vw, 18px); font-weight: 700;
    background: #0b5ed7; color: #fff;
    transition: transform .06s ease, box-shadow .2s ease, filter .2s ease;
    width: min(100%, 320px);
    box-shadow: 0 8px 18px rgba(11,94,215,.25);
    touch-action: manipulation;
  }
  button#tap:active { transform: scale(.98); filter: brightness(.95); }
  button#tap:disabled { cursor: progress; filter: grayscale(.3); }
  .row { display: flex; gap: 10px; justify-content: center; flex-wrap: wrap; }
  .footer { margin-top: 16px; font-size: 12px; color: #667085; }
"""

PAGE_JS = """
  const countEl = document.getElementById('count');
  const statusEl = document.getElementById('status');
  const btn = document.getElementById('tap');

  async function readCount(url, options) {
    const r = await fetch(url, options);
    if (!r.ok) throw new Error('HTTP ' + r.status);
    const j = await r.json();
    return j.count ?? 0;
  }

  function setStatus(msg) { statusEl.textContent = msg || ''; }

  async function init() {
    try {
      countEl.textContent = await readCount('/api/count');
      setStatus('Ready.');
    } catch (e) {
      countEl.textContent = '?';
      setStatus('Failed to load count.');
    }
  }

  btn.addEventListener('click', async () => {
    btn.disabled = true;
    setStatus('Saving...');
    try {
      countEl.textContent = await readCount('/api/increment', { method: 'POST' });
      setStatus('Saved.');
    } catch (e) {
      setStatus('Save failed.');
    } finally {
      btn.disabled = false;
    }
  });

  // passive listener removes the mobile tap delay
  btn.addEventListener('touchstart', () => {}, { passive: true });

  init();
"""


def CounterCard(data_name: str = "touchcount.json"):
    return Main(
        H1(PAGE_TITLE),
        P("Tap the button and watch the total grow. The count is saved on the server in ",
          Code(data_name), ".", cls="hint"),
        Div("-", id="count", cls="count"),
        Div(Button("Tap / Click", id="tap", aria_label="Increase count"), cls="row"),
        Div(id="status", cls="footer"),
        cls="card",
    )


def render_page(data_name: str = "touchcount.json") -> str:
    """Render the full HTML document as a string."""
    page = ft(
        "html",
        Head(
            Meta(charset="utf-8"),
            Meta(name="viewport", content="width=device-width, initial-scale=1"),
            Title(PAGE_TITLE),
            Style(PAGE_CSS),
        ),
        Body(CounterCard(data_name), Script(PAGE_JS)),
        lang="en",
    )
    html = to_xml(page).lstrip()
    if not html.lower().startswith("<!doctype"):
        html = "<!doctype html>\n" + html
    return html

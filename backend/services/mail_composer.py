from __future__ import annotations

from dataclasses import dataclass

HTML_TEMPLATE = """<html>
<body>
    <h2>AI Meeting Summary</h2>
    <div>{body}</div>
</body>
</html>
"""


@dataclass(frozen=True)
class ComposedEmail:
    text: str
    html: str


def compose_email(summary: str) -> ComposedEmail:
    # summary is model output and is not escaped
    return ComposedEmail(text=summary, html=HTML_TEMPLATE.format(body=summary.replace("\n", "<br>")))

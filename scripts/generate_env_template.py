"""Generate .env.example from the Settings fields, with defaults filled in and secrets left blank."""
from pathlib import Path

from backend.config import Settings

SECRET_FIELDS = {"groq_api_key", "email_pass", "aws_access_key_id", "aws_secret_access_key"}

root = Path(__file__).resolve().parents[1]
dest = root / '.env.example'

lines = []
for name, field in Settings.model_fields.items():
    default = field.default
    if name in SECRET_FIELDS or default is None:
        value = ''
    elif isinstance(default, list):
        value = ','.join(default)
    else:
        value = str(default)
    lines.append(f"{name.upper()}={value}")

dest.write_text('\n'.join(lines) + '\n')
print(f'Wrote template to {dest}')

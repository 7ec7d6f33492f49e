"""
drinkmatch - Prompt Logger.

One markdown file per remote call, under prompt_logs/<run>/, so prompts can
be tuned against what the models actually returned. Controlled by
DRINKMATCH_LOG_PROMPTS (settings.drinkmatch_log_prompts); off by default.

    prompt_logs/20261018_141502/01_recommend.md
    prompt_logs/20261018_141502/02_illustrate.md
"""

import json
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel

from drinkmatch.config import get_settings

LOG_DIR = Path("prompt_logs")

# Per-process run folder and call numbering
_run_id: str | None = None
_call_counter = 0


def is_enabled() -> bool:
    return get_settings().drinkmatch_log_prompts


def _next_log_path(step: str) -> Path:
    global _run_id, _call_counter
    if _run_id is None:
        _run_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    _call_counter += 1

    run_dir = LOG_DIR / _run_id
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir / f"{_call_counter:02d}_{step}.md"


def _answers_table(answers: Mapping[str, str] | None) -> str:
    if not answers:
        return "(no answers)\n"
    rows = "\n".join(f"| {key} | {value} |" for key, value in answers.items())
    return f"| Question | Answer |\n|---|---|\n{rows}\n"


def log_recommend_call(
    *,
    model: str,
    system_prompt: str,
    user_prompt: str,
    answers: Mapping[str, str] | None = None,
    response: BaseModel | None = None,
    error: str | None = None,
) -> Path | None:
    """
    Log a recommend step: the quiz answers, both prompts, and the parsed
    drink (as the model's JSON keys) or the error.

    Returns the file written, or None when logging is off.
    """
    if not is_enabled():
        return None

    if error:
        outcome = f"**ERROR:** {error}\n"
    elif response is not None:
        outcome = f"```json\n{json.dumps(response.model_dump(by_alias=True), indent=2)}\n```\n"
    else:
        outcome = "(no response)\n"

    path = _next_log_path("recommend")
    path.write_text(
        f"""# Recommend

**Time:** {datetime.now().isoformat()}
**Model:** {model}

## Quiz Answers

{_answers_table(answers)}
## System Prompt

```
{system_prompt}
```

## User Prompt

```
{user_prompt}
```

## Drink

{outcome}""",
        encoding="utf-8",
    )
    return path


def log_image_call(
    *,
    model: str,
    prompt: str,
    size: str,
    url: str | None = None,
    error: str | None = None,
) -> Path | None:
    """Log an illustrate step: scene prompt, image size, and the URL or error."""
    if not is_enabled():
        return None

    outcome = f"**ERROR:** {error}" if error else f"![drink]({url})\n\n{url}"

    path = _next_log_path("illustrate")
    path.write_text(
        f"""# Illustrate

**Time:** {datetime.now().isoformat()}
**Model:** {model}
**Size:** {size}

## Scene Prompt

```
{prompt}
```

## Image

{outcome}
""",
        encoding="utf-8",
    )
    return path


def get_logging_status() -> dict:
    """Report prompt logging configuration (shown at startup)."""
    return {"file_logging": is_enabled(), "log_dir": str(LOG_DIR)}

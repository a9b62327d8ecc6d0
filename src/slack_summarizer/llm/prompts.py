import yaml
from pathlib import Path
from typing import Dict, Optional, Union

QUESTION_MARKER = "@#*&Question: "

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant. You will summarize the conversation using {language} only. "
    "You should answer the question if the last message starts with `{marker}` "
    "else you just create a helpful summary WITHOUT ORIGINAL MESSAGES. "
    "The summary should contain speaker names. "
    "Do not include the messages directly in the summary."
)

def load_prompt(name: str, prompts_dir: Union[str, Path] = "data/prompts") -> Optional[str]:
    """
    Look up a prompt override as .yaml (`content:` key) or .md.
    Returns None when no override exists.
    """
    yaml_path = Path(prompts_dir) / f"{name}.yaml"
    if yaml_path.exists():
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
            return data.get("content") or None

    md_path = Path(prompts_dir) / f"{name}.md"
    if md_path.exists():
        with open(md_path, "r", encoding="utf-8") as f:
            return f.read()

    return None

def system_prompt(language: str = "Korean", template: Optional[str] = None) -> Dict[str, str]:
    """
    Fill `{language}` and `{marker}` in the template. Other braces are left
    as written, so override prompts may contain JSON examples.
    """
    content = (template or DEFAULT_SYSTEM_PROMPT).strip()
    content = content.replace("{language}", language).replace("{marker}", QUESTION_MARKER)
    return {"role": "system", "content": content}

def question_entry(question: str) -> Dict[str, str]:
    return {"role": "user", "content": f"{QUESTION_MARKER}{question}"}

import json
from pathlib import Path
from textwrap import dedent
from typing import Dict, Any, List, Optional

import yaml
import tomli_w


class ProjectFactory:
    def __init__(self, root_path: Path):
        self.root_path = root_path
        self._files_to_create: List[Dict[str, Any]] = []
        self._pyproject_data: Dict[str, Any] = {}

    def with_config(self, namesmith_config: Dict[str, Any]) -> "ProjectFactory":
        tool = self._pyproject_data.setdefault("tool", {})
        tool["namesmith"] = namesmith_config
        return self

    def with_project_name(self, name: str) -> "ProjectFactory":
        project = self._pyproject_data.setdefault("project", {})
        project["name"] = name
        return self

    def with_response(self, path: str, content: str) -> "ProjectFactory":
        self._files_to_create.append(
            {"path": path, "content": dedent(content), "format": "raw"}
        )
        return self

    def with_function(
        self,
        path: str,
        name: str,
        parameters: Optional[List[Any]] = None,
        local_variables: Optional[List[Any]] = None,
    ) -> "ProjectFactory":
        data = {
            "name": name,
            "parameters": list(parameters or []),
            "locals": list(local_variables or []),
        }
        self._files_to_create.append({"path": path, "content": data, "format": "yaml"})
        return self

    def with_message_override(self, lang: str, messages: Dict[str, str]) -> "ProjectFactory":
        self._files_to_create.append(
            {
                "path": f".namesmith/needle/{lang}/overrides.json",
                "content": json.dumps(messages),
                "format": "raw",
            }
        )
        return self

    def build(self) -> Path:
        if self._pyproject_data:
            self._files_to_create.append(
                {
                    "path": "pyproject.toml",
                    "content": self._pyproject_data,
                    "format": "toml",
                }
            )

        for file_spec in self._files_to_create:
            output_path = self.root_path / file_spec["path"]
            output_path.parent.mkdir(parents=True, exist_ok=True)

            fmt = file_spec["format"]
            if fmt == "toml":
                content_to_write = tomli_w.dumps(file_spec["content"])
            elif fmt == "yaml":
                content_to_write = yaml.safe_dump(file_spec["content"], sort_keys=False)
            else:
                content_to_write = file_spec["content"]

            output_path.write_text(content_to_write, encoding="utf-8")

        return self.root_path

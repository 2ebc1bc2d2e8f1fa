from __future__ import annotations

from datetime import datetime

from .models import RepoRequest

README_TEMPLATE = """\
# {name}

{description}

## Description

Add a more detailed description of your project here.

## Installation

Instructions on how to install and set up your project.

## Usage

Examples of how to use your project.

## Contributing

Guidelines for contributing to this project.

## License

This project is licensed under the [MIT License](LICENSE).

---

*Created on {created}*
"""


def render_readme(request: RepoRequest, now: datetime | None = None) -> str:
    now = now or datetime.now()
    return README_TEMPLATE.format(
        name=request.name,
        description=request.description,
        created=f"{now:%a %b %d %H:%M:%S %Y}",
    )

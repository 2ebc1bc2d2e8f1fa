from datetime import datetime

from ghrepo.models import RepoRequest
from ghrepo.readme import render_readme


def test_render_readme_fills_title_description_and_date():
    request = RepoRequest(name="meu-repo", description="Ferramenta de teste")
    content = render_readme(request, now=datetime(2024, 3, 5, 14, 30, 0))

    assert content.startswith("# meu-repo\n\nFerramenta de teste\n")
    for section in ("## Description", "## Installation", "## Usage", "## Contributing", "## License"):
        assert section in content
    assert "*Created on Tue Mar 05 14:30:00 2024*" in content

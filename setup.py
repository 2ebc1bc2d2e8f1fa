from setuptools import setup, find_packages
"""
Configurar
ghrepo config set default_branch develop
ghrepo config set visibility private

# Ver configurações
ghrepo config get default_branch
ghrepo config  # mostra tudo

# Criar repositório
ghrepo create
ghrepo create --name meu-repo --private --readme
ghrepo check

# Remover configurações
ghrepo config unset clone_dir
ghrepo config unset --all
"""
setup(
    name="ghrepo",
    version="0.3.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "requests>=2.25.0",
        "python-dotenv>=0.19.0",
        "rich>=12.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "ghrepo=ghrepo.cli.main:main",
        ],
    },
    description="Uma ferramenta CLI interativa para criar repositórios GitHub com o gh",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    keywords="github, git, gh, cli, repository",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
)

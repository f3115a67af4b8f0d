"""Shared fixtures: a small documentation root on disk.

Layout:
    <root>/README.md
    <root>/CHANGELOG.md
    <root>/skills/shiny-mediator/SKILL.md
    <root>/src/Shiny.Mediator/{Mediator.cs, MediatorContext.cs, IMediator.cs}
    <root>/tests/MediatorTests.cs
"""

import pytest

from mediator_docs.resolvers import FilesystemResolver

SKILL_MD = """\
# Shiny.Mediator Skill

Use requests when you need a result.

```csharp
public record MyRequest(string Argument) : IRequest<MyResponse>;
public partial class MyRequestHandler : IRequestHandler<MyRequest, MyResponse> { }
```

Commands are fire and forget.

```csharp
public partial class MyCommandHandler : ICommandHandler<MyCommand> { }
```

Cache results with an attribute.

```csharp
[Cache(AbsoluteExpirationSeconds = 60)]
public partial class CachedHandler : IRequestHandler<MyRequest, MyResponse> { }
```
"""

README_MD = """\
# Shiny Mediator

A mediator for .NET apps.

Install the package and register the mediator.
"""

SKILL_FILE = "skills/shiny-mediator/SKILL.md"
README_FILE = "README.md"


@pytest.fixture
def docs_root(tmp_path):
    """A documentation root with skill, readme and a few source files."""
    root = tmp_path / "mediator"
    (root / "skills" / "shiny-mediator").mkdir(parents=True)
    (root / SKILL_FILE).write_text(SKILL_MD, encoding="utf-8")
    (root / README_FILE).write_text(README_MD, encoding="utf-8")
    (root / "CHANGELOG.md").write_text("# Changelog\n\n" + "- fix\n" * 200, encoding="utf-8")

    src = root / "src" / "Shiny.Mediator"
    src.mkdir(parents=True)
    (src / "Mediator.cs").write_text("public class Mediator : IMediator { }\n", encoding="utf-8")
    (src / "MediatorContext.cs").write_text("public class MediatorContext { }\n", encoding="utf-8")
    (src / "IMediator.cs").write_text("public interface IMediator { }\n", encoding="utf-8")
    (src / "README.txt").write_text("notes\n", encoding="utf-8")

    (root / "tests").mkdir()
    (root / "tests" / "MediatorTests.cs").write_text("public class MediatorTests { }\n", encoding="utf-8")
    (root / ".git").mkdir()
    (root / ".git" / "config").write_text("[core]\n", encoding="utf-8")
    return root


@pytest.fixture
def fs_resolver(docs_root):
    return FilesystemResolver(docs_root, SKILL_FILE, README_FILE)

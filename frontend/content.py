from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_CONTENT_PATH = Path(__file__).resolve().parent / "data" / "site.json"


class NavbarLink(BaseModel):
    title: str
    link: str


class Quality(BaseModel):
    id: int
    image: str
    title: str
    description: str


class Dish(BaseModel):
    id: int
    image: str
    title: str
    category: str


class TeamMember(BaseModel):
    id: int
    image: str
    name: str
    designation: str


class SiteContent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    navbar_links: list[NavbarLink] = Field(alias="navbarLinks")
    our_qualities: list[Quality] = Field(alias="ourQualities")
    dishes: list[Dish]
    team: list[TeamMember]
    about: str = ""


class _ContentFile(BaseModel):
    data: list[SiteContent] = Field(min_length=1)


def load_site_content(path: str | Path | None = None) -> SiteContent:
    """Read the static site sections from a ``{"data": [{...}]}`` JSON file."""
    content_path = Path(path) if path is not None else DEFAULT_CONTENT_PATH
    return _ContentFile.model_validate_json(content_path.read_text(encoding="utf-8")).data[0]

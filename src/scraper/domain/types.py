from typing import Literal

WikiProvider = Literal["github", "gitlab"]

SUPPORTED_PROVIDERS: tuple[WikiProvider, ...] = ("github", "gitlab")
DEFAULT_PROVIDER: WikiProvider = "github"
DEFAULT_PAGE = "Home"

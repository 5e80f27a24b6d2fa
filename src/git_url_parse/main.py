import logging
from argparse import ArgumentParser
from os import getenv
from typing import NoReturn, Optional

from dotenv import load_dotenv
from git.exc import InvalidGitRepositoryError, NoSuchPathError
from git.repo import Repo

from .azure_devops_provider import AzureDevOpsProvider
from .errors import GitUrlParseError
from .generic_provider import GenericProvider
from .git_provider import GitProvider, build_git_provider
from .git_url import GitUrl
from .gitlab_provider import GitLabProvider

version = "0.1.0"
program = "git-url-parse"

providers: dict[str, type[GitProvider]] = {
    "generic": GenericProvider,
    "gitlab": GitLabProvider,
    "azure-devops": AzureDevOpsProvider,
}
provider_choices = ["auto", "none", *providers]

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None):
    parser = ArgumentParser(prog=program, description="Parse urls used by git clone.")
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {version}"
    )
    parser.add_argument("--trim-auth", action="store_true", help="drop user and token")
    parser.add_argument(
        "--url-compat", action="store_true", help="print the conformant url form"
    )
    parser.add_argument("--provider", choices=provider_choices)
    parser.add_argument(
        "--remotes", action="store_true", help="also parse the remotes of this repository"
    )
    parser.add_argument("urls", nargs="*")

    args = parser.parse_args(argv)

    load_dotenv()
    setup_logging()

    provider_name = args.provider or getenv("GITURLPARSE_PROVIDER", "auto")
    if provider_name not in provider_choices:
        fail(f"Unknown provider {provider_name}. Use one of: {', '.join(provider_choices)}.")

    urls = list(args.urls)
    if args.remotes:
        urls.extend(collect_remote_urls())

    if not urls:
        fail("Nothing to parse. Pass urls or --remotes.")

    for url in urls:
        try:
            git_url = GitUrl.parse(url)
            if args.trim_auth:
                git_url = git_url.trim_auth()
            provider = resolve_provider(git_url, provider_name)
        except GitUrlParseError as error:
            fail(f"{url}: {error}")

        print(describe(url, git_url, provider, args.url_compat))


def setup_logging():
    # 0 = silent (default), 1 = INFO, 2 = DEBUG
    level_map = {"0": logging.CRITICAL, "1": logging.INFO, "2": logging.DEBUG}
    level = level_map.get(getenv("GITURLPARSE_LOG_LEVEL", "0"), logging.CRITICAL)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def collect_remote_urls() -> list[str]:
    try:
        repo = Repo(".", search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        fail("Not a Git repository")

    urls = [url for remote in repo.remotes for url in remote.urls]
    info(f"Found {len(urls)} remote url(s) in {repo.working_tree_dir}")
    return urls


def resolve_provider(git_url: GitUrl, provider_name: str) -> Optional[GitProvider]:
    if provider_name == "none":
        return None

    if provider_name == "auto":
        try:
            return build_git_provider(git_url)
        except GitUrlParseError as error:
            logger.info("No provider info for %s: %s", git_url, error)
            return None

    return git_url.provider_info(providers[provider_name])


def describe(
    original: str, git_url: GitUrl, provider: Optional[GitProvider], url_compat: bool
) -> str:
    rendered = git_url.to_string(url_compat=url_compat)
    lines = [
        f"Original: {original}",
        f"Parsed:   {rendered}",
        f"  scheme: {git_url.scheme}",
        f"  user:   {git_url.user}",
        f"  token:  {'***' if git_url.token else None}",
        f"  host:   {git_url.host}",
        f"  port:   {git_url.port}",
        f"  path:   {git_url.path}",
        f"  hint:   {git_url.hint.value}",
    ]
    if provider:
        lines.append(f"  provider: {type(provider).__name__} {provider.fullname()}")
    return "\n".join(lines)


def fail(message: str) -> NoReturn:
    raise SystemExit(f"{program} error: {message}")


def info(message: str):
    print(f"{program} info: {message}")

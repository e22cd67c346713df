import json
import unittest

from src.scraper.domain.errors import ConfigError, UnsupportedProviderError
from src.scraper.domain.models import FetchTarget, WikiPageConfig
from src.scraper.domain.rules import (
    build_fallback_url,
    build_primary_url,
    expand_targets,
    parse_exclude_prefixes,
    parse_wiki_page_configs,
)


class UrlRulesTests(unittest.TestCase):
    def test_github_urls(self):
        self.assertEqual(
            build_primary_url("github", "octo", "tools", "Install"),
            "https://raw.githubusercontent.com/wiki/octo/tools/Install.md",
        )
        self.assertEqual(
            build_fallback_url("github", "octo", "tools", "Install"),
            "https://github.com/octo/tools.wiki.git/raw/master/Install.md",
        )

    def test_gitlab_url_has_no_fallback(self):
        self.assertEqual(
            build_primary_url("gitlab", "group", "proj", "Home"),
            "https://gitlab.com/group/proj/-/wikis/Home.md",
        )
        self.assertIsNone(build_fallback_url("gitlab", "group", "proj", "Home"))

    def test_unsupported_provider_raises(self):
        with self.assertRaises(UnsupportedProviderError) as ctx:
            build_primary_url("bitbucket", "a", "b", "c")
        self.assertEqual(str(ctx.exception), "Unsupported type: bitbucket")


class ExpandTargetsTests(unittest.TestCase):
    def test_expands_in_config_then_page_order(self):
        configs = [
            WikiPageConfig(provider="github", owner="a", repo="r1", pages=("P1", "P2")),
            WikiPageConfig(provider="gitlab", owner="b", repo="r2", pages=("Home",)),
            WikiPageConfig(provider="github", owner="c", repo="r3", pages=()),
        ]
        targets = expand_targets(configs)
        self.assertEqual(
            targets,
            [
                FetchTarget(provider="github", owner="a", repo="r1", page="P1"),
                FetchTarget(provider="github", owner="a", repo="r1", page="P2"),
                FetchTarget(provider="gitlab", owner="b", repo="r2", page="Home"),
            ],
        )
        self.assertEqual([t.label for t in targets], ["a/r1/P1", "a/r1/P2", "b/r2/Home"])


class ParseConfigTests(unittest.TestCase):
    def test_parse_exclude_prefixes_trims_and_drops_empty(self):
        self.assertEqual(parse_exclude_prefixes(" sudo , rm,, ,#"), ["sudo", "rm", "#"])
        self.assertEqual(parse_exclude_prefixes(""), [])
        self.assertEqual(parse_exclude_prefixes(None), [])

    def test_parse_wiki_page_configs(self):
        raw = json.dumps(
            [
                {"type": "gitlab", "owner": "g", "repo": "p", "pages": ["Home", "Setup"]},
                {"owner": "o", "repo": "r", "pages": ["Install"]},
            ]
        )
        self.assertEqual(
            parse_wiki_page_configs(raw),
            [
                WikiPageConfig(provider="gitlab", owner="g", repo="p", pages=("Home", "Setup")),
                WikiPageConfig(provider="github", owner="o", repo="r", pages=("Install",)),
            ],
        )

    def test_empty_config_defaults_to_no_pages(self):
        self.assertEqual(parse_wiki_page_configs(""), [])
        self.assertEqual(parse_wiki_page_configs("[]"), [])

    def test_unknown_type_is_kept_for_fetch_time_reporting(self):
        configs = parse_wiki_page_configs('[{"type": "svn", "owner": "o", "repo": "r", "pages": ["x"]}]')
        self.assertEqual(configs[0].provider, "svn")

    def test_invalid_json_raises_config_error(self):
        with self.assertRaises(ConfigError):
            parse_wiki_page_configs("[{not json")

    def test_non_list_raises_config_error(self):
        with self.assertRaises(ConfigError):
            parse_wiki_page_configs('{"owner": "o"}')

    def test_missing_keys_raise_config_error(self):
        with self.assertRaises(ConfigError) as ctx:
            parse_wiki_page_configs('[{"owner": "o", "pages": []}]')
        self.assertIn("repo", str(ctx.exception))

    def test_pages_must_be_a_list(self):
        with self.assertRaises(ConfigError):
            parse_wiki_page_configs('[{"owner": "o", "repo": "r", "pages": "Home"}]')

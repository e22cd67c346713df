import unittest

from src.scraper.domain.extraction import extract_bash_blocks, filter_by_prefix


class ExtractBashBlocksTests(unittest.TestCase):
    def test_single_bash_block(self):
        self.assertEqual(extract_bash_blocks("```bash\necho hi\n```"), ["echo hi"])

    def test_no_matching_fences_returns_empty_list(self):
        self.assertEqual(extract_bash_blocks("# Title\n\nno code here"), [])
        self.assertEqual(extract_bash_blocks(""), [])

    def test_language_tag_is_case_insensitive(self):
        markdown = "```Bash\none\n```\n\n```SH\ntwo\n```\n\n```shell\nthree\n```"
        self.assertEqual(extract_bash_blocks(markdown), ["one", "two", "three"])

    def test_other_or_missing_tags_are_ignored(self):
        markdown = (
            "```python\nprint('x')\n```\n"
            "```\nplain fence\n```\n"
            "```shellscript\nnot shell\n```\n"
            "```sh\nkept\n```"
        )
        self.assertEqual(extract_bash_blocks(markdown), ["kept"])

    def test_blocks_keep_document_order_and_are_trimmed(self):
        markdown = (
            "Intro\n"
            "```bash\n\n  apt-get update\n  apt-get install -y git\n\n```\n"
            "Middle text\n"
            "```sh   \nmake install\n```\n"
        )
        self.assertEqual(
            extract_bash_blocks(markdown),
            ["apt-get update\n  apt-get install -y git", "make install"],
        )

    def test_empty_bodies_are_excluded(self):
        self.assertEqual(extract_bash_blocks("```bash\n   \n```\n```sh\nls\n```"), ["ls"])

    def test_closing_fence_does_not_need_its_own_line(self):
        self.assertEqual(extract_bash_blocks("```bash\necho done```"), ["echo done"])

    def test_tag_must_be_followed_by_newline(self):
        self.assertEqual(extract_bash_blocks("```bash echo inline```"), [])


class FilterByPrefixTests(unittest.TestCase):
    def test_empty_prefixes_is_identity(self):
        blocks = ["echo hi\nrm -rf /", "ls"]
        self.assertEqual(filter_by_prefix(blocks, []), blocks)

    def test_removes_matching_lines(self):
        self.assertEqual(filter_by_prefix(["echo hi\nrm -rf /"], ["rm"]), ["echo hi"])

    def test_block_with_only_excluded_lines_is_dropped(self):
        self.assertEqual(filter_by_prefix(["rm -rf /"], ["rm"]), [])

    def test_prefix_is_matched_after_leading_whitespace(self):
        self.assertEqual(
            filter_by_prefix(["cd app\n    sudo reboot\n\tmake"], ["sudo"]),
            ["cd app\n\tmake"],
        )

    def test_surviving_lines_keep_order_and_spacing(self):
        block = "step one\n# comment\n  step two\n\nstep three"
        self.assertEqual(
            filter_by_prefix([block], ["#"]),
            ["step one\n  step two\n\nstep three"],
        )

    def test_prefix_match_is_case_sensitive_and_literal(self):
        self.assertEqual(filter_by_prefix(["RM file\nrm file\nr.m file"], ["rm", "r.m"]), ["RM file"])

    def test_any_of_multiple_prefixes_removes_a_line(self):
        self.assertEqual(
            filter_by_prefix(["sudo a\ncurl b\necho c", "sudo x\ncurl y"], ["sudo", "curl"]),
            ["echo c"],
        )

    def test_block_left_with_blank_lines_only_is_dropped(self):
        self.assertEqual(filter_by_prefix(["rm a\n   \nrm b"], ["rm"]), [])

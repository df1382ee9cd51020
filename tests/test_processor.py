"""Tests for ContentProcessor class."""

import io
import pytest
from pathlib import Path

from obsidian_hugo.core.processor import ContentProcessor
from obsidian_hugo.transforms.links import post_link


class TestContentProcessor:
    """Tests for ContentProcessor class."""

    @pytest.fixture
    def asset_dirs(self, tmp_path):
        asset_source = tmp_path / "vault" / "assets"
        asset_dest = tmp_path / "site" / "assets"
        asset_source.mkdir(parents=True)
        asset_dest.mkdir(parents=True)
        (asset_source / "pic.png").write_bytes(b"\x89PNG data")
        (asset_source / "My Photo.jpg").write_bytes(b"\xff\xd8 jpeg")
        return asset_source, asset_dest

    @pytest.fixture
    def processor(self, asset_dirs):
        asset_source, asset_dest = asset_dirs
        return ContentProcessor(asset_source=asset_source, asset_dest=asset_dest)

    def _process(self, processor: ContentProcessor, text: str) -> str:
        out = io.StringIO()
        processor.process(text.split("\n"), out)
        return out.getvalue()

    def test_wikilink_conversion(self, processor):
        assert processor.rewrite_line("See [[Other Note]] here.") == "See [Other Note](/posts/other-note/) here."

    def test_multiple_wikilinks(self, processor):
        result = processor.rewrite_line("[[A]] and [[B C]]")
        assert result == "[A](/posts/a/) and [B C](/posts/b-c/)"

    def test_wikilink_path_target(self, processor):
        result = processor.rewrite_line("[[Projects/Plan]]")
        assert result == "[Projects/Plan](/posts/projects-plan/)"

    def test_image_reference_copies_asset(self, processor, asset_dirs):
        _, asset_dest = asset_dirs
        result = processor.rewrite_line("![[pic.png]]")

        assert result == "![pic.png](/assets/pic.png)"
        assert (asset_dest / "pic.png").read_bytes() == b"\x89PNG data"
        assert processor.copied_assets == [asset_dest / "pic.png"]

    def test_image_name_is_slugified(self, processor, asset_dirs):
        _, asset_dest = asset_dirs
        result = processor.rewrite_line("[[My Photo.jpg]]")

        assert result == "[my-photo.jpg](/assets/my-photo.jpg)"
        assert (asset_dest / "my-photo.jpg").exists()

    def test_repeated_image_copied_each_time(self, processor, asset_dirs):
        _, asset_dest = asset_dirs
        processor.rewrite_line("[[pic.png]] [[pic.png]]")
        assert processor.copied_assets == [asset_dest / "pic.png", asset_dest / "pic.png"]

    def test_image_extension_is_case_sensitive(self, processor):
        assert processor.rewrite_line("[[photo.PNG]]") == "[photo.PNG](/posts/photo.png/)"

    def test_missing_asset_raises(self, processor):
        with pytest.raises(FileNotFoundError):
            processor.rewrite_line("[[missing.png]]")

    def test_blank_reference_kept_literal(self, processor):
        assert processor.rewrite_line("a [[ ]] b [[]]") == "a [[ ]] b [[]]"

    def test_unclosed_reference_kept(self, processor):
        assert processor.rewrite_line("[[A]] then [[broken") == "[A](/posts/a/) then [[broken"

    def test_single_brackets_untouched(self, processor):
        line = "[link](http://example.com) and [x]"
        assert processor.rewrite_line(line) == line

    def test_custom_link_transform(self, asset_dirs):
        asset_source, asset_dest = asset_dirs
        processor = ContentProcessor(asset_source, asset_dest, link_transform=post_link("/blog"))
        assert processor.rewrite_line("[[Note]]") == "[Note](/blog/note/)"

    def test_every_line_gets_newline(self, processor):
        assert self._process(processor, "one\ntwo") == "one\ntwo\n"

    def test_code_fence_not_rewritten(self, processor):
        text = "before [[A]]\n```\n[[x]]\n```\nafter [[B]]"
        assert self._process(processor, text) == (
            "before [A](/posts/a/)\n"
            "```\n"
            "[[x]]\n"
            "```\n"
            "after [B](/posts/b/)\n"
        )

    def test_code_fence_with_language(self, processor):
        text = "```python\nx = [[1]]\n```\n[[A]]"
        assert self._process(processor, text) == "```python\nx = [[1]]\n```\n[A](/posts/a/)\n"

    def test_indented_fence(self, processor):
        text = "  ```\n[[x]]\n  ```\n[[y]]"
        assert self._process(processor, text) == "  ```\n[[x]]\n  ```\n[y](/posts/y/)\n"

    def test_image_in_fence_not_copied(self, processor):
        self._process(processor, "```\n[[missing.png]]\n```")
        assert processor.copied_assets == []

    def test_fence_flag_toggles_on_each_marker(self, processor):
        text = "```\n[[a]]\n```\n[[b]]\n```\n[[c]]"
        assert self._process(processor, text) == "```\n[[a]]\n```\n[b](/posts/b/)\n```\n[[c]]\n"

    def test_unclosed_fence_runs_to_end(self, processor):
        text = "```\n[[x]]\n[[y]]"
        assert self._process(processor, text) == "```\n[[x]]\n[[y]]\n"

    def test_truncation_marker(self, processor):
        text = "keep\n=== end ===\n[[missing.png]]\nmore"
        assert self._process(processor, text) == "keep\n"
        assert processor.copied_assets == []

    def test_truncation_marker_with_whitespace(self, processor):
        assert self._process(processor, "a\n   === end ===  \nb") == "a\n"

    def test_truncation_marker_inside_fence(self, processor):
        assert self._process(processor, "```\ncode\n=== end ===\nb") == "```\ncode\n"

    def test_marker_must_be_whole_line(self, processor):
        text = "not === end === here\nb"
        assert self._process(processor, text) == "not === end === here\nb\n"

"""
Unit tests for the HTML signal extractor.
"""
import json

import pytest

from job_tracker_ai.services.html_extractor import collapse_whitespace, extract_signals

JOB_PAGE = """
<html>
  <head>
    <title>  Senior Engineer | Acme  </title>
    <meta name="description" content="Join Acme as a senior engineer.">
    <meta property="og:title" content="Senior Engineer at Acme">
    <meta property="og:description" content="Build rockets.">
    <script type="application/ld+json">{"@type": "JobPosting", "title": "Senior Engineer"}</script>
    <script type="application/ld+json">{ not valid json </script>
    <script type="application/ld+json">{"@type": "Organization", "name": "Acme"}</script>
  </head>
  <body>
    <header>Site header</header>
    <nav>Jobs | About</nav>
    <div class="job-description">
      <h1>Senior   Engineer</h1>
      <p>Design and
         build things.</p>
      <div class="sidebar">Related jobs</div>
      <div class="ads">Buy now</div>
    </div>
    <footer>Copyright</footer>
  </body>
</html>
"""


DEEP_JSON_LD = '<script type="application/ld+json">' + "[" * 100000 + "</script><body>x</body>"
HUGE_JSON_LD = (
    '<script type="application/ld+json">'
    + json.dumps({"@type": "JobPosting", "description": "lorem ipsum " * 200000})
    + "</script><main>Role text</main>"
)


def test_reads_title_and_meta_tags():
    signals = extract_signals(JOB_PAGE)

    assert signals.title == "Senior Engineer | Acme"
    assert signals.meta_description == "Join Acme as a senior engineer."
    assert signals.og_title == "Senior Engineer at Acme"
    assert signals.og_description == "Build rockets."


def test_missing_meta_tags_default_to_empty():
    signals = extract_signals("<html><body><p>Only text</p></body></html>")

    assert signals.title == ""
    assert signals.meta_description == ""
    assert signals.og_title == ""
    assert signals.og_description == ""
    assert signals.structured_entries == []


def test_malformed_json_ld_is_skipped():
    signals = extract_signals(JOB_PAGE)

    assert signals.structured_entries == [
        {"@type": "JobPosting", "title": "Senior Engineer"},
        {"@type": "Organization", "name": "Acme"},
    ]
    # Remaining content is still extracted
    assert "Design and build things." in signals.clean_text


def test_noise_elements_are_removed_from_text():
    signals = extract_signals(JOB_PAGE)

    assert signals.clean_text == "Senior Engineer Design and build things."
    for noise in ("Site header", "Jobs | About", "Related jobs", "Buy now", "Copyright", "JobPosting"):
        assert noise not in signals.clean_text


def test_first_matching_selector_wins():
    html = """
    <body>
      <article>Article text</article>
      <div class="content">Generic content</div>
      <div class="job-details">Job details text</div>
      <main>Main region text</main>
    </body>
    """
    assert extract_signals(html).clean_text == "Main region text"
    assert extract_signals(html.replace("<main>Main region text</main>", "")).clean_text == "Job details text"


def test_role_main_matches_before_job_classes():
    html = '<body><div class="job-posting">Posting</div><section role="main">Role main</section></body>'

    assert extract_signals(html).clean_text == "Role main"


def test_custom_selector_order():
    html = '<body><main>Main</main><article>Article</article></body>'

    assert extract_signals(html, content_selectors=["article", "main"]).clean_text == "Article"


def test_falls_back_to_normalized_body_text():
    html = """
    <html><body>
      <nav>Menu</nav>
      <div><p>Hello   world</p>
      <p>Second
      paragraph</p></div>
    </body></html>
    """
    assert extract_signals(html).clean_text == "Hello world Second paragraph"


def test_empty_content_region_falls_back_to_body():
    html = "<body><main>   </main><p>Body text</p></body>"

    assert extract_signals(html).clean_text == "Body text"


def test_fragment_without_body_uses_whole_document():
    assert extract_signals("<p>Just  a <b>fragment</b></p>").clean_text == "Just a fragment"


def test_clean_text_is_capped():
    html = "<body><main>" + ("word " * 5000) + "</main></body>"

    assert len(extract_signals(html).clean_text) == 10000
    assert len(extract_signals(html, max_chars=50).clean_text) == 50


@pytest.mark.parametrize(
    "html",
    [
        "",
        None,
        "plain text, no markup",
        "<div><p>unclosed",
        "<script type='application/ld+json'>{</script>",
        "<html><head><title></title></head></html>",
        "<meta name='description'>",
        "</body></html><<<>>>&&&",
        # Nesting deeper than the interpreter recursion limit
        DEEP_JSON_LD,
        "<script type=\"application/ld+json\">" + "{\"a\": " * 50000 + "</script><body>x</body>",
        HUGE_JSON_LD,
        "<body>" + "<div>" * 5000 + "deep text" + "</div>" * 5000 + "</body>",
        "<body>" + "<div>" * 5000 + "unclosed",
    ],
    ids=lambda html: repr(html)[:40],
)
def test_never_raises_and_respects_cap(html):
    signals = extract_signals(html)

    assert isinstance(signals.clean_text, str)
    assert len(signals.clean_text) <= 10000


def test_extraction_is_idempotent():
    assert extract_signals(JOB_PAGE) == extract_signals(JOB_PAGE)


def test_collapse_whitespace():
    assert collapse_whitespace("  a\n\t b   c ") == "a b c"
    assert collapse_whitespace("") == ""


def test_deeply_nested_json_ld_is_skipped():
    html = (
        '<script type="application/ld+json">{"@type": "JobPosting", "title": "Kept"}</script>'
        + DEEP_JSON_LD
    )
    signals = extract_signals(html)

    assert signals.structured_entries == [{"@type": "JobPosting", "title": "Kept"}]
    assert signals.clean_text == "x"


def test_huge_json_ld_block_is_kept():
    signals = extract_signals(HUGE_JSON_LD)

    assert len(signals.structured_entries) == 1
    assert signals.structured_entries[0]["@type"] == "JobPosting"
    assert signals.clean_text == "Role text"


def test_deeply_nested_markup():
    html = "<body>" + "<div>" * 5000 + "deep text" + "</div>" * 5000 + "</body>"

    assert extract_signals(html).clean_text == "deep text"

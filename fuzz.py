#!/usr/bin/env python3
"""
Random fuzzer for the pretty-printer.
Generates random documents from a small tag vocabulary and checks that the
printed output keeps the properties a pretty-printer must have.
"""

import argparse
import random
import sys
import time
import traceback

from htmlpretty import parse, to_html
from htmlpretty.constants import LITERAL_ELEMENTS, VOID_ELEMENTS
from htmlpretty.tags import is_inline

BLOCK_TAGS = ["div", "p", "section", "h1", "h2", "blockquote", "article", "my-element"]
INLINE_TAGS = ["a", "b", "em", "span", "code", "strong", "q", "small"]
LIST_TAGS = ["ul", "ol"]
VOID_TAGS = ["br", "img", "wbr", "hr", "input"]

ATTRIBUTES = ["id", "class", "href", "title", "data-x", "lang", "hidden"]

WORDS = [
    "lorem", "ipsum", "dolor", "sit", "amet", "a", "x", "consectetur", "adipiscing",
    "(", ")", ".", ",", "&amp;", "&lt;", "&gt;", "été", "☃", "\"quoted\"",
    "averyveryveryveryverylongwordthatcannotbewrapped",
]

WHITESPACE = ["", " ", "  ", "\n", "\n  ", "\t", " \n\t "]


def random_text(min_words=0, max_words=12):
    """Generate text with random inner and outer whitespace."""
    words = random.choices(WORDS, k=random.randint(min_words, max_words))
    text = "".join(word + random.choice(WHITESPACE[1:]) for word in words)
    return random.choice(WHITESPACE) + text.rstrip() + random.choice(WHITESPACE)


def random_attributes():
    attrs = []
    for name in random.sample(ATTRIBUTES, k=random.randint(0, 3)):
        if name == "hidden":
            attrs.append(name)
        elif name == "class":
            attrs.append(f'class="{random_text(1, 4)}"')
        else:
            attrs.append(f'{name}="{random_text(1, 6).strip()}"')
    return "".join(" " + attr for attr in attrs)


def fuzz_inline(depth=0, max_depth=3):
    tag = random.choice(INLINE_TAGS)
    if depth >= max_depth or random.random() < 0.5:
        inner = random_text(0, 5)
    else:
        inner = random_text(0, 3) + fuzz_inline(depth + 1, max_depth) + random_text(0, 3)
    return f"<{tag}{random_attributes()}>{inner}</{tag}>"


def fuzz_paragraph():
    parts = []
    for _ in range(random.randint(1, 6)):
        choice = random.random()
        if choice < 0.5:
            parts.append(random_text(1, 15))
        elif choice < 0.85:
            parts.append(fuzz_inline())
        else:
            parts.append(f"<{random.choice(VOID_TAGS[:3])}{random_attributes()}>")
    return "<p" + random_attributes() + ">" + "".join(parts) + "</p>"


def fuzz_list():
    tag = random.choice(LIST_TAGS)
    items = "".join("<li>" + random.choice([random_text(1, 8), fuzz_inline()]) for _ in range(random.randint(0, 4)))
    return f"<{tag}>{items}</{tag}>"


def fuzz_literal():
    tag = random.choice(sorted(LITERAL_ELEMENTS))
    body = random_text(0, 10).replace("&amp;", "&").replace("&lt;", "<")
    return f"<{tag}>{body}</{tag}>"


def fuzz_pre():
    return "<pre>" + random_text(0, 10) + random.choice(["", fuzz_inline()]) + "</pre>"


def fuzz_block(depth=0, max_depth=4):
    choice = random.random()
    if depth >= max_depth or choice < 0.35:
        return fuzz_paragraph()
    if choice < 0.5:
        return fuzz_list()
    if choice < 0.6:
        return fuzz_literal()
    if choice < 0.65:
        return fuzz_pre()
    if choice < 0.7:
        return "<hr>"
    if choice < 0.75:
        return "<!-- " + random_text(0, 4) + " -->"
    tag = random.choice(BLOCK_TAGS)
    children = "".join(fuzz_block(depth + 1, max_depth) for _ in range(random.randint(0, 4)))
    return f"<{tag}{random_attributes()}>{random_text(0, 3)}{children}</{tag}>"


def generate_document():
    head = "<title>" + random_text(0, 6) + "</title>"
    if random.random() < 0.3:
        head += fuzz_literal()
    body = "".join(fuzz_block() for _ in range(random.randint(1, 5)))
    doctype = "<!DOCTYPE html>" if random.random() < 0.8 else ""
    return f"{doctype}<html><head>{head}</head><body>{body}</body></html>"


def text_of(node):
    if node.is_text:
        return node.text_content
    return "".join(text_of(child) for child in node.children)


def words_of(node):
    """Words of ``node``; block element boundaries separate words."""
    if node.is_text:
        return node.text_content
    text = "".join(words_of(child) for child in node.children)
    if node.is_element and not is_inline(node):
        return f" {text} "
    return text


def literal_elements(node):
    if node.tag_name in LITERAL_ELEMENTS:
        yield node
        return
    for child in node.children:
        yield from literal_elements(child)


def check_document(html, indent, wrap):
    """Return a list of property violations for ``html``."""
    problems = []
    root = parse(html)
    once = to_html(root, indent, wrap)
    reparsed = parse(once)

    if to_html(reparsed, indent, wrap) != once:
        problems.append("output is not stable when printed again")

    for tag in VOID_ELEMENTS:
        if f"</{tag}>" in once:
            problems.append(f"void element <{tag}> has a closing tag")

    for node in literal_elements(root):
        if f"<{node.tag_name}>{text_of(node)}</{node.tag_name}>" not in once:
            problems.append(f"contents of <{node.tag_name}> changed")

    if words_of(root).split() != words_of(reparsed).split():
        problems.append("words changed")

    return problems


def run_fuzzer(num_tests, indent="  ", wrap=40, seed=None, verbose=False):
    if seed is not None:
        random.seed(seed)

    print(f"Fuzzing htmlpretty with {num_tests} documents (wrap={wrap})...")
    failures = []
    crashes = []
    start_total = time.perf_counter()

    for i in range(num_tests):
        if verbose and i % 100 == 0:
            print(f"  Test {i}/{num_tests}...")
        html = generate_document()
        try:
            problems = check_document(html, indent, wrap)
        except Exception as e:
            crashes.append({"test_num": i, "html": html, "error": str(e), "traceback": traceback.format_exc()})
            if verbose:
                print(f"  CRASH: Test {i}: {e}")
            continue
        if problems:
            failures.append({"test_num": i, "html": html, "problems": problems})
            if verbose:
                print(f"  FAIL: Test {i}: {', '.join(problems)}")

    elapsed_total = time.perf_counter() - start_total

    print(f"\n{'='*60}")
    print("FUZZING RESULTS")
    print(f"{'='*60}")
    print(f"Total tests:    {num_tests}")
    print(f"Successes:      {num_tests - len(failures) - len(crashes)}")
    print(f"Failures:       {len(failures)}")
    print(f"Crashes:        {len(crashes)}")
    print(f"Total time:     {elapsed_total:.2f}s")

    for failure in failures[:10]:
        print(f"\nTest #{failure['test_num']}:")
        print(f"  HTML: {failure['html'][:200]!r}...")
        print(f"  Problems: {'; '.join(failure['problems'])}")

    for crash in crashes[:10]:
        print(f"\nTest #{crash['test_num']}:")
        print(f"  HTML: {crash['html'][:200]!r}...")
        print(f"  Error: {crash['error']}")
        if verbose:
            print(crash["traceback"])

    return not failures and not crashes


def main():
    parser = argparse.ArgumentParser(description="Fuzz the HTML pretty-printer with random documents")
    parser.add_argument(
        "--num-tests", "-n",
        type=int,
        default=1000,
        help="Number of documents to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--wrap", "-w",
        type=int,
        default=40,
        help="Wrap width to print with (default: 40)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Just print N sample documents and their pretty-printed form",
    )

    args = parser.parse_args()

    if args.sample:
        if args.seed is not None:
            random.seed(args.seed)
        for i in range(args.sample):
            html = generate_document()
            print(f"=== Sample {i+1} ===")
            print(html)
            print()
            print(to_html(parse(html), "  ", args.wrap))
        return

    success = run_fuzzer(args.num_tests, wrap=args.wrap, seed=args.seed, verbose=args.verbose)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()

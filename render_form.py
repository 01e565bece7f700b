"""
Form PDF Renderer
-----------------
Usage:  python render_form.py <form.json> <answers.json> [output.pdf]
                              [--signatures FILE] [--company FILE] [--verbose]
        python render_form.py --sample [output.pdf] [--company FILE] [--verbose]
"""
import json
import logging
import os
import sys

from formprint import inspect_document, render_document, render_sample_document
from formprint.errors import InputError
from formprint.model import CompanySettings, Form
from formprint.sample import SAMPLE_TITLE

_OPTIONS = ("--signatures", "--company")


def load_json(path):
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as exc:
        raise InputError(f"cannot read {path}: {exc.strerror or exc}") from exc
    except ValueError as exc:
        raise InputError(f"{path} is not valid JSON: {exc}") from exc


def load_signatures(path):
    if not path:
        return []
    data = load_json(path)
    if isinstance(data, dict):
        data = data.get("signatures", [])
    if not isinstance(data, list):
        raise InputError(f"{path}: expected a list of signature records")
    return data


def load_company(path):
    return CompanySettings.from_dict(load_json(path)) if path else None


def parse_args(argv):
    positional, opts, flags = [], {}, set()
    i = 0
    while i < len(argv):
        a = argv[i]
        if a in _OPTIONS:
            if i + 1 >= len(argv):
                raise InputError(f"{a} needs a file name")
            opts[a] = argv[i + 1]
            i += 2
            continue
        if a.startswith("--"):
            flags.add(a)
        else:
            positional.append(a)
        i += 1
    return positional, opts, flags


def write_pdf(data, out):
    with open(out, "wb") as fh:
        fh.write(data)
    summary = inspect_document(data)
    print(f"\n  Done -> {out}  ({summary.page_count} page(s))\n")
    return summary


def render(form_path, answers_path, out, signatures_path=None, company_path=None):
    print(f"\n{'='*60}\n  Form PDF Renderer\n  Form   : {form_path}\n"
          f"  Answers: {answers_path}\n  Out    : {out}\n{'='*60}\n")

    print("[1/4] Loading form...")
    form = Form.from_dict(load_json(form_path))
    print(f"      {form.title!r} rev {form.revision}, {len(form.blocks)} top-level block(s)")

    print("[2/4] Loading answers...")
    answers = load_json(answers_path)
    if not isinstance(answers, dict):
        raise InputError(f"{answers_path}: expected an object of answers")
    print(f"      {len(answers)} answer(s)")

    print("[3/4] Loading signatures and company settings...")
    signatures = load_signatures(signatures_path)
    company = load_company(company_path)
    print(f"      {len(signatures)} signature record(s)")

    print("[4/4] Rendering...")
    return write_pdf(render_document(form, answers, signatures, company), out)


def render_sample(out, company_path=None):
    print(f"\n{'='*60}\n  Form PDF Renderer (sample)\n  Form: {SAMPLE_TITLE}\n"
          f"  Out : {out}\n{'='*60}\n")
    company = load_company(company_path)
    return write_pdf(render_sample_document(company), out)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    try:
        positional, opts, flags = parse_args(argv)
        if "--verbose" in flags:
            logging.basicConfig(level=logging.DEBUG,
                                format="%(levelname)s %(name)s: %(message)s")
        if "--sample" in flags:
            out = positional[0] if positional else "sample_form.pdf"
            render_sample(out, opts.get("--company"))
            return 0
        if len(positional) < 2:
            print(__doc__)
            return 1
        form_path, answers_path = positional[:2]
        for p in (form_path, answers_path):
            if not os.path.exists(p):
                print(f"Not found: {p}", file=sys.stderr)
                return 1
        out = (positional[2] if len(positional) >= 3
               else os.path.splitext(form_path)[0] + "_rendered.pdf")
        render(form_path, answers_path, out,
               opts.get("--signatures"), opts.get("--company"))
        return 0
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

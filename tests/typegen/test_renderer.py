from jswrap_dts.typegen.renderer import render_declaration, render_description_comment, render_doc_comment


def test_bare_signature_without_documentation(make_record):
    record = make_record(0, type="method", cls="Widget", name="spin", typedef="spin(): void")
    assert render_declaration(record) == "spin(): void"


def test_description_and_params(make_record):
    record = make_record(
        0,
        type="method",
        cls="Graphics",
        name="setFont12x20",
        description="Set the current font",
        params=[["scale", "int", "Scale factor"]],
        typedef="setFont12x20(scale: number): Graphics",
    )
    assert render_declaration(record) == "\n".join(
        [
            "/**",
            " * Set the current font",
            " * @param scale Scale factor",
            " */",
            "setFont12x20(scale: number): Graphics",
        ]
    )


def test_returns_line(make_record):
    record = make_record(
        0,
        type="method",
        name="m",
        params=[["a", "int", "first"], ["b", "int", "second"]],
        typedef="m(a: number, b: number): number",
        **{"return": ["int", "the sum"]},
    )
    assert render_doc_comment(record) == [
        "/**",
        " * @param a first",
        " * @param b second",
        " * @returns the sum",
        " */",
    ]


def test_comment_delimiters_without_description(make_record):
    record = make_record(0, type="event", name="tap", params=[["dir", "string", "direction"]])
    assert render_declaration(record) == "\n".join(
        [
            "/**",
            " * @param dir direction",
            " */",
            "on(event: 'tap', callback: (dir: string) => void): void",
        ]
    )


def test_description_separator_count_gives_line_count(make_record):
    record = make_record(0, type="method", name="m", description="a\r\nb\r\n\r\nc", typedef="m(): void")
    comment = render_doc_comment(record)
    assert comment[1:-1] == [" * a", " * b", " *", " * c"]


def test_multiline_param_text_continues(make_record):
    record = make_record(0, type="method", name="m", params=[["opts", "JsVar", ["An object:", "- x"]]], typedef="m(opts: any): void")
    assert render_doc_comment(record)[1:-1] == [" * @param opts An object:", " * - x"]


def test_overloads_each_get_the_comment(make_record):
    record = make_record(
        0,
        type="method",
        name="m",
        description="Does m",
        typedef=["m(): void", "m(a: number): void", "m(a: string): void"],
    )
    lines = render_declaration(record).split("\n")
    comment = ["/**", " * Does m", " */"]
    assert lines == [*comment, "m(): void", *comment, "m(a: number): void", *comment, "m(a: string): void"]


def test_overloads_without_documentation(make_record):
    record = make_record(0, type="method", name="m", typedef=["m(): void", "m(a: number): void"])
    assert render_declaration(record) == "m(): void\nm(a: number): void"


def test_description_comment_ignores_params(make_record):
    record = make_record(0, type="class", cls="Widget", description="A widget", params=[["a", "int", "x"]])
    assert render_description_comment(record) == ["/**", " * A widget", " */"]


def test_description_comment_empty_without_description(make_record):
    assert render_description_comment(make_record(0, type="class", cls="Widget")) == []

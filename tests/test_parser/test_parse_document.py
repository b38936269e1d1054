from __future__ import annotations

import pytest
import pytest_check as check
from asscue import (
    DEFAULT_COLOUR, Dialogue, FontStyle, FontWeight, MatchNotFoundError, Point, RGBA, Section, Style, parse
)


def test_parse_script_info(sample: str) -> None:
    doc = parse(sample)
    info = doc.script_info
    check.equal(info['Title'], 'Sample: with colon')
    check.equal(info['ScriptType'], 'v4.00+')
    check.equal(len(info), 6)
    check.equal(info.title, 'Sample: with colon')
    check.equal(info.play_res_x, 1920)
    check.equal(info.play_res_y, 1080)
    check.equal(info.wrap_style, 0)
    check.is_true(info.scaled_border_and_shadow)


def test_parse_script_info_absent_keys() -> None:
    info = parse('[Script Info]\nPlayResX: wide\n').script_info
    check.is_none(info.play_res_x)
    check.is_none(info.play_res_y)
    check.is_none(info.scaled_border_and_shadow)
    check.is_none(info.title)


def test_parse_styles(sample: str) -> None:
    doc = parse(sample)
    check.equal(list(doc.styles), ['Default', 'Sign'])

    default = doc.styles['Default']
    check.equal(default.fontname, 'Arial')
    check.equal(default.fontsize, 48.0)
    check.equal(default.primary_color, RGBA(255, 255, 255, 1.0))
    check.equal(default.secondary_color, RGBA(255, 0, 0, 1.0))
    check.equal(default.back_color, RGBA(0, 0, 0, 0.5))
    check.is_false(default.bold)
    check.equal(default.alignment, 2)
    check.equal((default.margin_l, default.margin_r, default.margin_v), (10, 10, 30))
    check.equal(default.encoding, 1)

    sign = doc.styles['Sign']
    check.equal(sign.primary_color, RGBA(255, 255, 0, 1.0))
    check.equal((sign.bold, sign.italic, sign.underline, sign.strikeout), (True, True, False, True))
    check.equal(sign.spacing, 1.5)
    check.equal(sign.alignment, 7)
    check.is_true(sign.an_is_top())
    check.is_true(sign.an_is_left())


def test_parse_dialogues(sample: str) -> None:
    doc = parse(sample)
    check.equal(len(doc.dialogues), 3)

    first, second, third = doc.dialogues
    check.equal(first.layer, 0)
    check.equal((first.start_time, first.end_time), (1000, 4000))
    check.equal(first.duration, 3000)
    check.equal(first.style, 'Default')
    check.equal(first.actor, 'Alice')
    check.equal(first.effect, '')
    check.equal(first.text, 'Hello, world, again')
    check.equal(first.plain_text, 'Hello, world, again')
    check.is_true(first.overrides.is_empty())

    check.equal(second.layer, 1)
    check.equal(second.style, 'Sign')
    check.equal(second.text, '{\\an9\\b1}Top {\\i1}right')
    check.equal(second.plain_text, 'Top right')
    check.equal(second.overrides.alignment, 9)
    check.equal(second.overrides.font_weight, FontWeight.BOLD)
    check.equal(second.overrides.font_style, FontStyle.ITALIC)

    check.equal(third.style, 'Missing')
    check.equal((third.margin_l, third.margin_r, third.margin_v), (5, 6, 7))
    check.equal(third.effect, 'fx')
    check.equal(third.overrides.position, Point(100, 200))


def test_parse_short_style_row() -> None:
    doc = parse('[V4+ Styles]\nStyle: Short,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,2,2,10\n')
    style = doc.styles['Short']
    check.equal(style.margin_l, 10)
    check.is_none(style.margin_r)
    check.is_none(style.margin_v)
    check.is_none(style.encoding)


def test_parse_very_short_style_row() -> None:
    style = parse('[V4 Styles]\nStyle: Tiny\n').styles['Tiny']
    check.is_none(style.fontname)
    check.is_none(style.fontsize)
    check.is_none(style.bold)
    check.is_none(style.alignment)
    check.equal(style.primary_color, DEFAULT_COLOUR)
    check.equal(style.back_color, DEFAULT_COLOUR)


def test_parse_style_redefined() -> None:
    doc = parse(
        '[V4+ Styles]\n'
        'Style: Default,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,2,2,10,10,10,1\n'
        'Style: Default,Verdana,30,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,2,8,10,10,10,1\n'
    )
    check.equal(len(doc.styles), 1)
    check.equal(doc.styles['Default'].fontname, 'Verdana')
    check.equal(doc.styles['Default'].alignment, 8)


def test_parse_unparseable_numbers() -> None:
    style = parse('[V4+ Styles]\nStyle: X,Arial,big,&H00FFFFFF,x,x,x,yes,0,0,0,a,b,c,d,e,f,g,h,i,j,k,l\n').styles['X']
    check.is_none(style.fontsize)
    check.is_none(style.alignment)
    check.is_none(style.margin_v)
    check.is_false(style.bold)
    check.equal(style.secondary_color, DEFAULT_COLOUR)


def test_parse_short_dialogue_row() -> None:
    doc = parse('[Events]\nDialogue: 0,0:00:01.00\n')
    dialogue = doc.dialogues[0]
    check.equal(dialogue.start_time, 1000)
    check.equal(dialogue.end_time, 0)
    check.is_none(dialogue.style)
    check.is_none(dialogue.margin_v)
    check.equal(dialogue.text, '')
    check.equal(dialogue.plain_text, '')


def test_parse_malformed_timestamps() -> None:
    dialogue = parse('[Events]\nDialogue: 0,1:2:3,later,Default,,0,0,0,,Text\n').dialogues[0]
    check.equal((dialogue.start_time, dialogue.end_time), (0, 0))
    check.equal(dialogue.plain_text, 'Text')


def test_parse_sections_and_lines_ignored() -> None:
    doc = parse(
        'Dialogue: 0,0:00:00.00,0:00:01.00,Default,,0,0,0,,before any section\n'
        '[Fonts]\n'
        'Dialogue: 0,0:00:00.00,0:00:01.00,Default,,0,0,0,,inside fonts\n'
        '[Events]\n'
        '   \n'
        '; Dialogue: 0,0:00:00.00,0:00:01.00,Default,,0,0,0,,commented\n'
        'Something else entirely\n'
        'Style: Default,Arial,20\n'
        '  Dialogue: 0,0:00:00.00,0:00:01.00,Default,,0,0,0,,kept  \n'
        '[Script Info]\n'
        'no colon here\n'
    )
    check.equal([d.text for d in doc.dialogues], ['kept'])
    check.equal(len(doc.styles), 0)
    check.equal(len(doc.script_info), 0)


def test_parse_crlf_and_bom(sample: str) -> None:
    doc = parse(sample.replace('\n', '\r\n'))
    check.equal(len(doc.dialogues), 3)
    check.equal(doc.dialogues[0].text, 'Hello, world, again')
    check.equal(doc.script_info['PlayResY'], '1080')


def test_parse_empty() -> None:
    doc = parse('')
    check.equal(len(doc.dialogues), 0)
    check.equal(len(doc.styles), 0)
    check.equal(len(doc.script_info), 0)


def test_parse_deterministic(sample: str) -> None:
    check.equal(parse(sample), parse(sample))


def test_parse_document_is_read_only(sample: str) -> None:
    doc = parse(sample)
    with pytest.raises(TypeError):
        doc.styles['New'] = doc.styles['Default']  # type: ignore[index]
    with pytest.raises(TypeError):
        doc.script_info['Title'] = 'x'  # type: ignore[index]
    with pytest.raises(AttributeError):
        doc.dialogues[0].text = 'x'  # type: ignore[misc]
    check.is_instance(doc.dialogues, tuple)


def test_section_from_header() -> None:
    check.equal(Section.from_header('Script Info'), Section.SCRIPT_INFO)
    check.equal(Section.from_header('V4+ Styles'), Section.STYLES)
    check.equal(Section.from_header('V4 Styles'), Section.STYLES)
    check.equal(Section.from_header('Events'), Section.EVENTS)
    check.equal(Section.from_header('events'), Section.NONE)
    check.equal(Section.from_header('Fonts'), Section.NONE)


def test_record_builders_reject_other_lines() -> None:
    with pytest.raises(MatchNotFoundError):
        Style.from_text('Format: Name, Fontname')
    with pytest.raises(MatchNotFoundError):
        Dialogue.from_text('Comment: 0,0:00:00.00,0:00:01.00,Default,,0,0,0,,x')

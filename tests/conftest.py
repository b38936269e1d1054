from __future__ import annotations

import pytest

SAMPLE = "\ufeff" + """[Script Info]
; Script generated by Aegisub 3.2.2
Title: Sample: with colon
ScriptType: v4.00+
WrapStyle: 0
ScaledBorderAndShadow: yes
PlayResX: 1920
PlayResY: 1080

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Default,Arial,48,&H00FFFFFF,&H000000FF,&H00000000,&H80000000,0,0,0,0,100,100,0,0,1,2,2,2,10,10,30,1
Style: Sign,Verdana,36,&H0000FFFF,&H000000FF,&H00101010,&H00000000,-1,-1,0,-1,100,100,1.5,0,1,0,0,7,40,50,60,1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:01.00,0:00:04.00,Default,Alice,0,0,0,,Hello, world, again
Comment: 0,0:00:02.00,0:00:03.00,Default,,0,0,0,,this is a comment
Dialogue: 1,0:00:02.50,0:00:05.00,Sign,,0,0,0,,{\\an9\\b1}Top {\\i1}right
Dialogue: 0,0:00:06.00,0:00:07.00,Missing,Bob,5,6,7,fx,{\\pos(100,200)}Placed

[Aegisub Extradata]
Data: 1,abc,e65
"""


@pytest.fixture
def sample() -> str:
    return SAMPLE

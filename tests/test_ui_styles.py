from dataclasses import fields

import pytest

from lstheme.lsc import LSColors, Pair
from lstheme.style import Colour, Fixed, Style
from lstheme.ui_styles import ColourScale, Size, UiStyles

NUMBER_FIELDS = ["number_byte", "number_kilo", "number_mega", "number_giga", "number_huge"]
UNIT_FIELDS = ["unit_byte", "unit_kilo", "unit_mega", "unit_giga", "unit_huge"]


def _apply(ls="", exa=""):
    ui = UiStyles()
    for pair in LSColors(ls).each_pair():
        ui.set_ls(pair)
    for pair in LSColors(exa).each_pair():
        if not ui.set_ls(pair):
            ui.set_exa(pair)
    return ui


def test_plain_is_all_default():
    ui = UiStyles.plain()
    assert ui == UiStyles()
    assert ui.colourful is False
    assert ui.filekinds.directory == Style()
    assert ui.punctuation == Style()


def test_default_theme_values():
    ui = UiStyles.default_theme(ColourScale.FIXED)
    assert ui.colourful is True
    assert ui.filekinds.directory == Colour.BLUE.bold()
    assert ui.perms.user_execute_file == Colour.GREEN.bold().underline()
    assert ui.links.multi_link_file == Colour.RED.on(Colour.YELLOW)
    assert ui.git.ignored == Style().dimmed()
    assert ui.punctuation == Fixed(244).normal()
    assert ui.broken_path_overlay == Style().underline()


def test_default_theme_uses_size_scale():
    for scale in ColourScale:
        assert UiStyles.default_theme(scale).size == Size.colourful(scale)


def test_size_gradient_numbers():
    size = Size.colourful(ColourScale.GRADIENT)
    assert [getattr(size, f) for f in NUMBER_FIELDS] == [
        Fixed(118).normal(),
        Fixed(190).normal(),
        Fixed(226).normal(),
        Fixed(220).normal(),
        Fixed(214).normal(),
    ]
    assert all(getattr(size, f) == Colour.GREEN.normal() for f in UNIT_FIELDS)


def test_size_fixed_numbers():
    size = Size.colourful(ColourScale.FIXED)
    assert all(getattr(size, f) == Colour.GREEN.bold() for f in NUMBER_FIELDS)
    assert size.major == Colour.GREEN.bold()
    assert size.minor == Colour.GREEN.normal()


@pytest.mark.parametrize(
    "ls, getter, expected",
    [
        ("di=31", lambda c: c.filekinds.directory, Colour.RED.normal()),
        ("ex=32", lambda c: c.filekinds.executable, Colour.GREEN.normal()),
        ("fi=33", lambda c: c.filekinds.normal, Colour.YELLOW.normal()),
        ("pi=34", lambda c: c.filekinds.pipe, Colour.BLUE.normal()),
        ("so=35", lambda c: c.filekinds.socket, Colour.PURPLE.normal()),
        ("bd=36", lambda c: c.filekinds.block_device, Colour.CYAN.normal()),
        ("cd=35", lambda c: c.filekinds.char_device, Colour.PURPLE.normal()),
        ("ln=34", lambda c: c.filekinds.symlink, Colour.BLUE.normal()),
        ("or=33", lambda c: c.broken_symlink, Colour.YELLOW.normal()),
    ],
)
def test_set_ls_keys(ls, getter, expected):
    ui = _apply(ls=ls)
    assert getter(ui) == expected
    expected_ui = UiStyles()
    assert ui != expected_ui or expected == Style()


@pytest.mark.parametrize(
    "exa, getter, expected",
    [
        ("ur=38;5;100", lambda c: c.perms.user_read, Fixed(100).normal()),
        ("uw=38;5;101", lambda c: c.perms.user_write, Fixed(101).normal()),
        ("ux=38;5;102", lambda c: c.perms.user_execute_file, Fixed(102).normal()),
        ("ue=38;5;103", lambda c: c.perms.user_execute_other, Fixed(103).normal()),
        ("gr=38;5;104", lambda c: c.perms.group_read, Fixed(104).normal()),
        ("gw=38;5;105", lambda c: c.perms.group_write, Fixed(105).normal()),
        ("gx=38;5;106", lambda c: c.perms.group_execute, Fixed(106).normal()),
        ("tr=38;5;107", lambda c: c.perms.other_read, Fixed(107).normal()),
        ("tw=38;5;108", lambda c: c.perms.other_write, Fixed(108).normal()),
        ("tx=38;5;109", lambda c: c.perms.other_execute, Fixed(109).normal()),
        ("su=38;5;110", lambda c: c.perms.special_user_file, Fixed(110).normal()),
        ("sf=38;5;111", lambda c: c.perms.special_other, Fixed(111).normal()),
        ("xa=38;5;112", lambda c: c.perms.attribute, Fixed(112).normal()),
        ("nb=38;5;115", lambda c: c.size.number_byte, Fixed(115).normal()),
        ("nk=38;5;116", lambda c: c.size.number_kilo, Fixed(116).normal()),
        ("nm=38;5;117", lambda c: c.size.number_mega, Fixed(117).normal()),
        ("ng=38;5;118", lambda c: c.size.number_giga, Fixed(118).normal()),
        ("nh=38;5;119", lambda c: c.size.number_huge, Fixed(119).normal()),
        ("ub=38;5;115", lambda c: c.size.unit_byte, Fixed(115).normal()),
        ("uk=38;5;116", lambda c: c.size.unit_kilo, Fixed(116).normal()),
        ("um=38;5;117", lambda c: c.size.unit_mega, Fixed(117).normal()),
        ("ug=38;5;118", lambda c: c.size.unit_giga, Fixed(118).normal()),
        ("uh=38;5;119", lambda c: c.size.unit_huge, Fixed(119).normal()),
        ("df=38;5;115", lambda c: c.size.major, Fixed(115).normal()),
        ("ds=38;5;116", lambda c: c.size.minor, Fixed(116).normal()),
        ("uu=38;5;117", lambda c: c.users.user_you, Fixed(117).normal()),
        ("un=38;5;118", lambda c: c.users.user_someone_else, Fixed(118).normal()),
        ("gu=38;5;119", lambda c: c.users.group_yours, Fixed(119).normal()),
        ("gn=38;5;120", lambda c: c.users.group_not_yours, Fixed(120).normal()),
        ("lc=38;5;121", lambda c: c.links.normal, Fixed(121).normal()),
        ("lm=38;5;122", lambda c: c.links.multi_link_file, Fixed(122).normal()),
        ("ga=38;5;123", lambda c: c.git.new, Fixed(123).normal()),
        ("gm=38;5;124", lambda c: c.git.modified, Fixed(124).normal()),
        ("gd=38;5;125", lambda c: c.git.deleted, Fixed(125).normal()),
        ("gv=38;5;126", lambda c: c.git.renamed, Fixed(126).normal()),
        ("gt=38;5;127", lambda c: c.git.typechange, Fixed(127).normal()),
        ("xx=38;5;128", lambda c: c.punctuation, Fixed(128).normal()),
        ("da=38;5;129", lambda c: c.date, Fixed(129).normal()),
        ("in=38;5;130", lambda c: c.inode, Fixed(130).normal()),
        ("bl=38;5;131", lambda c: c.blocks, Fixed(131).normal()),
        ("hd=38;5;132", lambda c: c.header, Fixed(132).normal()),
        ("lp=38;5;133", lambda c: c.symlink_path, Fixed(133).normal()),
        ("cc=38;5;134", lambda c: c.control_char, Fixed(134).normal()),
        ("bO=4", lambda c: c.broken_path_overlay, Style().underline()),
    ],
)
def test_set_exa_keys(exa, getter, expected):
    ui = _apply(exa=exa)
    assert getter(ui) == expected


def test_exa_sn_sets_all_numbers():
    ui = _apply(exa="sn=38;5;113")
    assert all(getattr(ui.size, f) == Fixed(113).normal() for f in NUMBER_FIELDS)
    assert all(getattr(ui.size, f) == Style() for f in UNIT_FIELDS)


def test_exa_sb_sets_all_units():
    ui = _apply(exa="sb=38;5;114")
    assert all(getattr(ui.size, f) == Fixed(114).normal() for f in UNIT_FIELDS)
    assert all(getattr(ui.size, f) == Style() for f in NUMBER_FIELDS)


def test_exa_overrides_ls():
    ui = _apply(ls="di=31", exa="di=32")
    assert ui.filekinds.directory == Colour.GREEN.normal()


def test_later_values_win():
    assert _apply(ls="pi=31:pi=32:pi=33").filekinds.pipe == Colour.YELLOW.normal()
    assert _apply(exa="da=36:da=35:da=34").date == Colour.BLUE.normal()


def test_set_ls_rejects_exa_keys():
    ui = UiStyles()
    assert ui.set_ls(Pair("uu", "38;5;117")) is False
    assert ui == UiStyles()


def test_set_exa_rejects_ls_keys_and_globs():
    ui = UiStyles()
    assert ui.set_exa(Pair("di", "31")) is False
    assert ui.set_exa(Pair("*.txt", "31")) is False
    assert ui == UiStyles()


def test_set_returns_true_for_known_keys():
    ui = UiStyles()
    assert ui.set_ls(Pair("di", "31")) is True
    assert ui.set_exa(Pair("sn", "1")) is True


def test_set_number_and_unit_style_leave_major_minor():
    ui = UiStyles.default_theme(ColourScale.GRADIENT)
    style = Colour.CYAN.underline()
    ui.set_number_style(style)
    ui.set_unit_style(style)
    assert {getattr(ui.size, f) for f in NUMBER_FIELDS + UNIT_FIELDS} == {style}
    assert ui.size.major == Colour.GREEN.bold()


def test_instances_do_not_share_sections():
    first = UiStyles()
    second = UiStyles()
    first.set_ls(Pair("di", "31"))
    assert second.filekinds.directory == Style()
    assert all(
        getattr(second.filekinds, f.name) == Style() for f in fields(second.filekinds)
    )


def test_size_colourful_rejects_unknown_scale():
    with pytest.raises(ValueError):
        Size.colourful("gradient")
"""Standard yi/ji rules, registered in the order they are applied."""

from __future__ import annotations

from dataclasses import replace

from . import tables as t
from .registry import AlmanacContext, YiJi, merge, register_rule
from .traditional import day_yi_ji


def officer_index(ctx: AlmanacContext) -> int:
    return (int(ctx.day_gz.branch) - int(ctx.month_branch)) % 12


def traditional(ctx: AlmanacContext, acc: YiJi) -> YiJi:
    yi, ji = day_yi_ji(ctx.month_gz, ctx.day_gz)
    return replace(acc, yi=merge(acc.yi, yi), ji=merge(acc.ji, ji))


def day_officer(ctx: AlmanacContext, acc: YiJi) -> YiJi:
    return replace(acc, officer=t.OFFICERS[officer_index(ctx)])


def peng_zu(ctx: AlmanacContext, acc: YiJi) -> YiJi:
    return replace(acc, peng_zu=(t.PENG_ZU_STEM[ctx.day_gz.stem], t.PENG_ZU_BRANCH[ctx.day_gz.branch]))


def yang_gong(ctx: AlmanacContext, acc: YiJi) -> YiJi:
    if ctx.lunar.is_leap_month or (ctx.lunar.month, ctx.lunar.day) not in t.YANG_GONG_DAYS:
        return acc
    return replace(acc, ji=merge(acc.ji, t.YANG_GONG_JI))


def si_li_si_jue(ctx: AlmanacContext, acc: YiJi) -> YiJi:
    if ctx.term_tomorrow in t.SI_LI_TERMS or ctx.term_tomorrow in t.SI_JUE_TERMS:
        return replace(acc, yi=(t.NOTHING_AUSPICIOUS,))
    return acc


def resolve_conflicts(ctx: AlmanacContext, acc: YiJi) -> YiJi:
    # ji wins
    return replace(acc, yi=tuple(x for x in acc.yi if x not in acc.ji))


register_rule("traditional", traditional)
register_rule("day_officer", day_officer)
register_rule("peng_zu", peng_zu)
register_rule("yang_gong", yang_gong)
register_rule("si_li_si_jue", si_li_si_jue)
register_rule("resolve_conflicts", resolve_conflicts)

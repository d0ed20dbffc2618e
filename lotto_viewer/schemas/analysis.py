"""Marshmallow schemas for the analysis API payload.

Wire keys are camelCase; loaded values are the frozen records in
`lotto_viewer.models.analysis`. List order is kept as received and no range
or uniqueness checks are applied to lotto numbers.
"""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, post_load

from lotto_viewer.models.analysis import AnalysisResponse, Combination, HotNumber, Stats


class _PayloadSchema(Schema):
    class Meta:
        unknown = EXCLUDE


class CombinationSchema(_PayloadSchema):
    theme = fields.String(required=True)
    numbers = fields.List(fields.Integer(strict=True), required=True)

    @post_load
    def _make(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return Combination(theme=data["theme"], numbers=tuple(data["numbers"]))


class HotNumberSchema(_PayloadSchema):
    number = fields.Integer(required=True, strict=True)
    count = fields.Integer(required=True, strict=True)

    @post_load
    def _make(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return HotNumber(number=data["number"], count=data["count"])


class StatsSchema(_PayloadSchema):
    latest_drw_no = fields.Integer(required=True, strict=True, data_key="latestDrwNo")
    hot_numbers = fields.List(fields.Nested(HotNumberSchema), load_default=list, data_key="hotNumbers")
    cold_numbers = fields.List(fields.Integer(strict=True), load_default=list, data_key="coldNumbers")
    recent_sums = fields.List(fields.Integer(strict=True), load_default=list, data_key="recentSums")
    section_map = fields.Dict(
        keys=fields.String(),
        values=fields.Integer(strict=True),
        load_default=dict,
        data_key="sectionMap",
    )

    @post_load
    def _make(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return Stats(
            latest_drw_no=data["latest_drw_no"],
            hot_numbers=tuple(data["hot_numbers"]),
            cold_numbers=tuple(data["cold_numbers"]),
            recent_sums=tuple(data["recent_sums"]),
            section_map=tuple(data["section_map"].items()),
        )


class AnalysisResponseSchema(_PayloadSchema):
    report = fields.String(required=True)
    combinations = fields.List(fields.Nested(CombinationSchema), load_default=list)
    stats = fields.Nested(StatsSchema, load_default=None, allow_none=True)

    @post_load
    def _make(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return AnalysisResponse(
            report=data["report"],
            combinations=tuple(data["combinations"]),
            stats=data["stats"],
        )

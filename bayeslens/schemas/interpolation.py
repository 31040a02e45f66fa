"""Pydantic schemas for monotone interpolation."""

from pydantic import BaseModel, Field, model_validator

from bayeslens.schemas.update import Finite


class InterpolateRequest(BaseModel):
    xs: list[Finite] = Field(description="Control abscissas, strictly increasing")
    ys: list[Finite] = Field(description="Control values, one per abscissa")
    eval_xs: list[Finite] = Field(description="Query abscissas, any order")

    @model_validator(mode="after")
    def check_control_points(self) -> "InterpolateRequest":
        if len(self.xs) != len(self.ys):
            raise ValueError("xs and ys must have same length")
        if any(b <= a for a, b in zip(self.xs, self.xs[1:])):
            raise ValueError("xs must be strictly increasing")
        return self


class InterpolateResponse(BaseModel):
    values: list[float]

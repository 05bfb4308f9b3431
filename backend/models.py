from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Literal, Union


def _not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be blank")
    return v


class FriendPreferences(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    interests: str = Field(..., description="What the friend enjoys (e.g., 'cooking, hiking')")
    loveLanguage: Union[str, List[str]] = Field(..., description="One love language or several")
    budget: str = Field(..., description="Free text budget (e.g., '$50')")
    occasion: str = Field(..., description="Birthday, anniversary, farewell, etc")
    gifterPreferences: str = Field(..., description="What the gifter enjoys making or doing")
    timeAvailable: str = Field(..., description="How long the gifter has (e.g., '2 weekends')")
    giftType: Literal["solo", "group"] = Field(..., description="Made by one person or a group")

    @field_validator("interests", "budget", "occasion", "gifterPreferences", "timeAvailable")
    @classmethod
    def _required_text(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("loveLanguage")
    @classmethod
    def _required_love_language(cls, v):
        if isinstance(v, str):
            return _not_blank(v)
        cleaned = [x.strip() for x in v if x.strip()]
        if not cleaned:
            raise ValueError("must name at least one love language")
        return cleaned

    def love_language_text(self) -> str:
        if isinstance(self.loveLanguage, str):
            return self.loveLanguage
        return ", ".join(self.loveLanguage)


class GiftIdea(BaseModel):
    id: int
    title: str
    description: str

    @field_validator("title", "description")
    @classmethod
    def _required_text(cls, v: str) -> str:
        return _not_blank(v)


class GiftRecipe(BaseModel):
    # Models often answer "estimatedPrice": 25 instead of "25"
    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: str
    description: Optional[str] = None
    estimatedPrice: str
    estimatedDuration: str
    materials: List[str]
    steps: List[str]

    @field_validator("title", "estimatedPrice", "estimatedDuration")
    @classmethod
    def _required_text(cls, v: str) -> str:
        return _not_blank(v)


class GiftIdeasRequest(BaseModel):
    friendPreferences: FriendPreferences


class GiftRecipeRequest(BaseModel):
    giftTitle: str
    friendPreferences: FriendPreferences
    # Top-level overrides, sent by older clients alongside the preferences
    occasion: Optional[str] = None
    timeAvailable: Optional[str] = None
    giftType: Optional[Literal["solo", "group"]] = None

    @field_validator("giftTitle")
    @classmethod
    def _required_title(cls, v: str) -> str:
        return _not_blank(v)

    def effective_preferences(self) -> FriendPreferences:
        overrides = {
            k: v
            for k, v in {
                "occasion": self.occasion,
                "timeAvailable": self.timeAvailable,
                "giftType": self.giftType,
            }.items()
            if v
        }
        if not overrides:
            return self.friendPreferences
        return self.friendPreferences.model_copy(update=overrides)


class GiftIdeasResponse(BaseModel):
    giftIdeas: List[GiftIdea]


class GiftRecipeResponse(BaseModel):
    recipe: GiftRecipe


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None

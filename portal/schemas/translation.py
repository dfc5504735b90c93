from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from portal.services.language import Language


class TranslateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = None
    target_language: Optional[Language] = Field(default=None, alias="targetLanguage")
    source_language: Optional[Language] = Field(default=None, alias="sourceLanguage")


class TranslateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    original_text: str = Field(serialization_alias="originalText")
    translated_text: str = Field(serialization_alias="translatedText")
    target_language: str = Field(serialization_alias="targetLanguage")
    source_language: str = Field(serialization_alias="sourceLanguage", description="'auto' when detected")

from pydantic import BaseModel, Field, AliasChoices, ValidationError, field_validator, model_validator
from typing import Dict, List

OPTIONS_PER_QUESTION = 4


class QuestionCreate(BaseModel):
    question_text: str = Field(validation_alias=AliasChoices("questionText", "text"))
    options: List[str]
    correct_answer: str = Field(validation_alias=AliasChoices("correctAnswer", "correct"))

    @field_validator("question_text")
    @classmethod
    def text_not_blank(cls, value):
        if not value.strip():
            raise ValueError("question text is required")
        return value

    @field_validator("options")
    @classmethod
    def four_options(cls, value):
        if len(value) != OPTIONS_PER_QUESTION:
            raise ValueError(f"exactly {OPTIONS_PER_QUESTION} options are required")
        if any(not option.strip() for option in value):
            raise ValueError("options must not be empty")
        return value

    @model_validator(mode="after")
    def answer_is_an_option(self):
        if self.correct_answer not in self.options:
            raise ValueError(
                f'correct answer "{self.correct_answer}" does not match any of the provided options'
            )
        return self

    def to_document(self, question_id):
        return {
            "_id": question_id,
            "questionText": self.question_text,
            "options": self.options,
            "correctAnswer": self.correct_answer,
        }


class QuizCreate(BaseModel):
    title: str
    subject_id: str = Field(validation_alias="subjectId")
    questions: List[QuestionCreate] = Field(min_length=1)

    @field_validator("title", "subject_id")
    @classmethod
    def not_blank(cls, value):
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()


class QuizSubmission(BaseModel):
    # question id -> chosen option
    answers: Dict[str, str] = {}


def validation_message(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message

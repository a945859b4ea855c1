"""System and user prompts for Korean long-form blog generation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

Tone = Literal["professional", "casual", "educational", "informative"]

DEFAULT_WORD_COUNT = 2500
MIN_MAX_TOKENS = 4096
MAX_MAX_TOKENS = 16384
REFERENCE_EXCERPT_CHARS = 2000

TONE_DESCRIPTIONS: dict[str, str] = {
    "professional": "전문적이고 권위 있는 톤",
    "casual": "친근하고 대화하듯 편안한 톤",
    "educational": "쉽게 설명하는 교육적인 톤",
    "informative": "객관적이고 정보 전달 위주의 톤",
}

PERSONAS: tuple[str, ...] = (
    "10년 경력의 전문 블로거",
    "해당 분야에서 실무 경험이 풍부한 현직자",
    "독자와 소통하는 것을 좋아하는 칼럼니스트",
    "쉬운 설명을 잘하는 교육 콘텐츠 전문가",
)

CATEGORY_GUIDELINES: dict[str, tuple[str, ...]] = {
    "금융": (
        "구체적 금액, 금리, 조건 수치를 반드시 포함하세요.",
        "금융 용어는 쉽게 풀어서 설명하되, 전문성을 잃지 마세요.",
        "주의사항, 리스크, 제한 조건을 명확히 안내하세요.",
    ),
    "건강": (
        "증상, 원인, 해결법 순서로 작성하세요.",
        "개인차가 있을 수 있음을 명시하고, 전문의 상담을 권장하세요.",
        "근거 있는 정보만 제공하고, 과장된 표현을 피하세요.",
    ),
    "부동산": (
        "절차, 서류, 비용을 구체적으로 안내하세요.",
        "시기별, 지역별 차이점을 언급하세요.",
        "세금, 수수료 등 숨은 비용도 명확히 안내하세요.",
    ),
    "정부지원": (
        "자격조건, 신청방법, 기간, 금액을 반드시 포함하세요.",
        "단계별로 명확하게 설명하세요 (1단계, 2단계...).",
        "신청 기한, 마감일을 명확히 표시하세요.",
    ),
    "IT": (
        "예시 코드나 명령어를 포함하세요 (적절한 경우).",
        "버전 정보, 호환성 정보를 명시하세요.",
        "초보자도 따라할 수 있도록 상세히 설명하세요.",
    ),
    "생활정보": (
        "실생활에서 바로 적용할 수 있는 팁 위주로 작성하세요.",
        "쉽고 간단한 방법을 우선 제시하세요.",
        "비용 절감, 시간 단축 등 실질적 이점을 강조하세요.",
    ),
}


def select_persona(keyword: str, persona: str | None = None) -> str:
    """Custom persona if given, else one rotated deterministically by keyword."""
    if persona:
        return persona
    return PERSONAS[sum(ord(char) for char in keyword) % len(PERSONAS)]


def max_tokens_for(word_count: int) -> int:
    return min(max(word_count * 3, MIN_MAX_TOKENS), MAX_MAX_TOKENS)


def build_system_prompt(
    keyword: str,
    *,
    word_count: int = DEFAULT_WORD_COUNT,
    tone: str = "casual",
    persona: str | None = None,
    category_style: str | None = None,
) -> str:
    tone_description = TONE_DESCRIPTIONS.get(tone, TONE_DESCRIPTIONS["casual"])
    guidelines = CATEGORY_GUIDELINES.get(category_style or "", ())
    guideline_block = ""
    if guidelines:
        bullet_lines = "\n".join(f"- {line}" for line in guidelines)
        guideline_block = f"\n[{category_style} 카테고리 가이드라인]\n{bullet_lines}\n"

    return f"""당신은 {select_persona(keyword, persona)}입니다. {tone_description}으로 자연스러운 한국어 블로그 글을 작성하세요.

[핵심 원칙]
- 주제: "{keyword}"
- 글의 모든 내용은 이 주제에 직접 관련되어야 합니다.
- 독자는 이 주제에 대한 실용적이고 구체적인 정보를 원합니다.
{guideline_block}
[자연스러운 글쓰기]
- 실제 사람이 자기 경험을 바탕으로 쓴 것처럼 작성하세요.
- "~거든요", "~더라고요", "~인데요" 같은 구어체를 자연스럽게 섞어주세요.
- 문단 길이를 다양하게 하세요.
- 이모지는 쓰지 마세요.

[금지 표현]
- "오늘은 ~에 대해 알아보겠습니다"
- "결론적으로", "마지막으로 정리하자면"
- 번호 목록만 나열하는 것

[구조]
1. 제목(h1): "{keyword}"를 포함한 클릭하고 싶은 제목
2. 도입부: 독자의 상황에 공감하며 시작 (1~2문단)
3. 본론: 3~5개의 h2 섹션, 섹션마다 다른 스타일 (리스트, 이야기, 비교표)
4. 마무리: 핵심 요약과 조언 한마디
5. 목표 글자 수: 약 {word_count}자
6. 마크다운 형식

[SEO]
- "{keyword}"를 제목과 첫 문단에 포함
- 소제목에 관련 키워드를 자연스럽게 배치
- 키워드 밀도 1.5~2.5%"""


def build_user_prompt(
    keyword: str,
    *,
    reference_titles: Sequence[str] = (),
    avoid_titles: Sequence[str] = (),
    related_keywords: Sequence[str] = (),
) -> str:
    """User message naming the topic, plus optional angle constraints."""
    parts = [
        f'반드시 "{keyword}"에 관한 블로그 글을 작성해주세요. '
        f'글의 모든 내용이 "{keyword}" 주제에 직접적으로 관련되어야 합니다.',
        f"주제 (반드시 이 주제로만 작성): {keyword}",
    ]
    if related_keywords:
        parts.append("함께 다룰 세부 키워드: " + ", ".join(related_keywords))
    if avoid_titles:
        titles = "\n".join(f"- {title}" for title in avoid_titles)
        parts.append(
            "이미 발행된 비슷한 글이 있습니다. 아래 글들과 겹치지 않는 새로운 관점으로 작성하세요.\n"
            f"{titles}"
        )
    if reference_titles:
        titles = "\n".join(f"- {title}" for title in reference_titles)
        parts.append(f"--- 참고 콘텐츠 ---\n{titles}")
    return "\n\n".join(parts)

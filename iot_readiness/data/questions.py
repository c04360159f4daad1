"""
data/questions.py — IoT 보안 진로 진단 문항 카탈로그 (고정 설정 데이터)

보기마다 채점 가중치(weight, 0.0 ~ 1.0)를 함께 선언한다.
지식 문항은 정답 1.0, 오답 0.0 (부분적으로 타당한 보기는 중간값).
"""

from typing import List

from iot_readiness.models.question_model import Dimension, Option, Question, Section


def _opt(value: str, label: str, weight: float) -> Option:
    return Option(value=value, label=label, weight=weight)


QUESTIONS: List[Question] = [
    # ── Introduction ─────────────────────────────────────────────────────────
    Question(
        id="intro_1",
        section=Section.INTRODUCTION,
        category="career_interest",
        type="understanding",
        prompt="How familiar are you with IoT (Internet of Things) devices and systems?",
        options=(
            _opt("expert", "Very familiar - I work with IoT systems regularly", 1.0),
            _opt("intermediate", "Moderately familiar - I understand the basics", 0.75),
            _opt("beginner", "Somewhat familiar - I've heard about it", 0.4),
            _opt("novice", "Not familiar - This is new to me", 0.15),
        ),
        dimensions=(Dimension.SKILL,),
    ),
    Question(
        id="intro_2",
        section=Section.INTRODUCTION,
        category="motivation",
        type="interest",
        prompt="What interests you most about cybersecurity?",
        options=(
            _opt("problem_solving", "Solving complex technical puzzles", 1.0),
            _opt("protection", "Protecting people and organizations from threats", 1.0),
            _opt("continuous_learning", "Staying ahead of evolving threats", 0.9),
            _opt("ethical_hacking", "Ethical hacking and penetration testing", 1.0),
        ),
        dimensions=(Dimension.INTEREST,),
    ),

    # ── Psychometric ─────────────────────────────────────────────────────────
    Question(
        id="psych_1",
        section=Section.PSYCHOMETRIC,
        category="personality",
        type="conscientiousness",
        prompt="When working on a complex project, I prefer to:",
        options=(
            _opt("detailed_plan", "Create a detailed plan and follow it systematically", 1.0),
            _opt("flexible_approach", "Start with a rough plan and adapt as I go", 0.75),
            _opt("dive_in", "Dive in immediately and figure it out along the way", 0.4),
            _opt("research_first", "Research extensively before starting any work", 0.85),
        ),
        dimensions=(Dimension.PSYCHOMETRIC,),
    ),
    Question(
        id="psych_2",
        section=Section.PSYCHOMETRIC,
        category="stress_tolerance",
        type="resilience",
        prompt="When facing a security incident under pressure, I typically:",
        options=(
            _opt("stay_calm", "Remain calm and work through the problem methodically", 1.0),
            _opt("get_energized", "Feel energized and motivated by the challenge", 0.7),
            _opt("seek_help", "Quickly involve team members and delegate tasks", 0.6),
            _opt("prioritize", "Focus on the most critical issues first", 0.9),
        ),
        dimensions=(Dimension.PSYCHOMETRIC,),
    ),
    Question(
        id="psych_3",
        section=Section.PSYCHOMETRIC,
        category="curiosity",
        type="learning_drive",
        prompt="How do you typically respond to new technologies or security threats?",
        options=(
            _opt("eager_explore", "I'm eager to explore and understand them immediately", 1.0),
            _opt("cautious_research", "I research carefully before engaging with them", 0.8),
            _opt("wait_proven", "I wait until they're proven and well-documented", 0.4),
            _opt("learn_needed", "I learn about them only when necessary for my work", 0.25),
        ),
        dimensions=(Dimension.PSYCHOMETRIC, Dimension.ABILITY),
    ),

    # ── Technical ────────────────────────────────────────────────────────────
    Question(
        id="tech_1",
        section=Section.TECHNICAL,
        category="networking",
        type="knowledge",
        prompt="Which protocol is commonly used for lightweight communication in IoT devices?",
        options=(
            _opt("mqtt", "MQTT (Message Queuing Telemetry Transport)", 1.0),
            _opt("http", "HTTP (Hypertext Transfer Protocol)", 0.0),
            _opt("ftp", "FTP (File Transfer Protocol)", 0.0),
            _opt("smtp", "SMTP (Simple Mail Transfer Protocol)", 0.0),
        ),
        dimensions=(Dimension.TECHNICAL,),
    ),
    Question(
        id="tech_2",
        section=Section.TECHNICAL,
        category="security",
        type="concepts",
        prompt="What is the primary security concern with default passwords on IoT devices?",
        options=(
            _opt("easy_access", "They provide easy unauthorized access to attackers", 1.0),
            _opt("performance", "They slow down device performance", 0.0),
            _opt("battery_life", "They drain battery life faster", 0.0),
            _opt("compatibility", "They cause compatibility issues with networks", 0.0),
        ),
        dimensions=(Dimension.TECHNICAL,),
    ),
    Question(
        id="tech_3",
        section=Section.TECHNICAL,
        category="encryption",
        type="application",
        prompt="In IoT security, what is the purpose of implementing AES encryption?",
        options=(
            _opt("data_protection", "To protect data confidentiality during transmission and storage", 1.0),
            _opt("device_authentication", "To authenticate devices on the network", 0.3),
            _opt("network_routing", "To improve network routing efficiency", 0.0),
            _opt("power_management", "To optimize power consumption", 0.0),
        ),
        dimensions=(Dimension.TECHNICAL, Dimension.COGNITIVE),
    ),

    # ── WISCAR ───────────────────────────────────────────────────────────────
    Question(
        id="wiscar_will",
        section=Section.WISCAR,
        category="will",
        type="persistence",
        prompt="When debugging a complex IoT security vulnerability that takes weeks to resolve, I:",
        options=(
            _opt("persist_enjoy", "Persist with determination and actually enjoy the challenge", 1.0),
            _opt("persist_duty", "Continue working on it because it's my responsibility", 0.8),
            _opt("seek_help_continue", "Seek help from others but continue my efforts", 0.65),
            _opt("prefer_switch", "Prefer to switch to other tasks when possible", 0.2),
        ),
        dimensions=(Dimension.WILL,),
    ),
    Question(
        id="wiscar_interest",
        section=Section.WISCAR,
        category="interest",
        type="engagement",
        prompt="Which IoT security activity would you find most engaging?",
        options=(
            _opt("penetration_testing", "Conducting penetration tests on IoT networks", 1.0),
            _opt("firmware_analysis", "Analyzing firmware for security vulnerabilities", 1.0),
            _opt("incident_response", "Responding to IoT security incidents", 0.9),
            _opt("policy_development", "Developing security policies and procedures", 0.6),
        ),
        dimensions=(Dimension.INTEREST,),
    ),
    Question(
        id="wiscar_skill",
        section=Section.WISCAR,
        category="skill",
        type="current_ability",
        prompt="How would you rate your current programming skills?",
        options=(
            _opt("advanced", "Advanced - I can code complex applications in multiple languages", 1.0),
            _opt("intermediate", "Intermediate - I'm comfortable with basic programming tasks", 0.7),
            _opt("beginner", "Beginner - I understand basics but need more practice", 0.4),
            _opt("none", "No programming experience", 0.1),
        ),
        dimensions=(Dimension.SKILL,),
    ),
    Question(
        id="wiscar_cognitive",
        section=Section.WISCAR,
        category="cognitive",
        type="analytical_reasoning",
        prompt="A smart thermostat starts sending traffic to an unknown server at 3 AM. Your first step is to:",
        options=(
            _opt("capture_traffic", "Capture and analyze the network traffic to see what is being sent", 1.0),
            _opt("check_firmware", "Check the firmware version against known vulnerabilities", 0.8),
            _opt("reboot_device", "Reboot the device and see if the behavior stops", 0.3),
            _opt("ignore", "Assume it is a routine update and ignore it", 0.0),
        ),
        dimensions=(Dimension.COGNITIVE,),
    ),
    Question(
        id="wiscar_ability",
        section=Section.WISCAR,
        category="ability",
        type="learning_style",
        prompt="When you need to learn an unfamiliar tool or protocol, you usually:",
        options=(
            _opt("hands_on_lab", "Set up a lab and learn by experimenting hands-on", 1.0),
            _opt("structured_course", "Follow a structured course or the official documentation", 0.85),
            _opt("ask_expert", "Ask an experienced colleague to walk me through it", 0.6),
            _opt("avoid", "Avoid it unless someone requires me to learn it", 0.15),
        ),
        dimensions=(Dimension.ABILITY,),
    ),
    Question(
        id="wiscar_real_world",
        section=Section.WISCAR,
        category="real_world",
        type="work_preference",
        prompt="Which work setting appeals to you most?",
        options=(
            _opt("security_team", "A security team protecting connected devices and infrastructure", 1.0),
            _opt("device_maker", "Building secure firmware and products at a device manufacturer", 0.85),
            _opt("consulting", "Advising clients through audits and penetration tests", 0.75),
            _opt("unrelated", "A role with little connection to security or devices", 0.2),
        ),
        dimensions=(Dimension.REAL_WORLD,),
    ),
]

"""
data/learning_path.py — 학습 경로 단계 및 추천 자격증 (고정 설정 데이터)
"""

from typing import List

from iot_readiness.models.learning_path_model import Certification, LearningModule, LearningStage

LEARNING_STAGES: List[LearningStage] = [
    LearningStage(
        id="beginner",
        title="Foundation Stage",
        description="Build your core knowledge in networking, programming, and cybersecurity basics",
        duration="8-12 weeks",
        difficulty="Beginner",
        modules=(
            LearningModule(name="Networking Fundamentals", duration="2 weeks"),
            LearningModule(name="Python Programming for Security", duration="3 weeks"),
            LearningModule(name="Cybersecurity Principles", duration="2 weeks"),
            LearningModule(name="IoT Architecture Overview", duration="1 week"),
        ),
    ),
    LearningStage(
        id="intermediate",
        title="Specialization Stage",
        description="Dive deep into IoT-specific security protocols, cryptography, and embedded systems",
        duration="10-14 weeks",
        difficulty="Intermediate",
        modules=(
            LearningModule(name="IoT Communication Protocols (MQTT, CoAP)", duration="3 weeks"),
            LearningModule(name="Cryptography & Encryption Methods", duration="3 weeks"),
            LearningModule(name="Embedded System Security", duration="4 weeks"),
            LearningModule(name="Wireless Security (WiFi, Bluetooth, Zigbee)", duration="2 weeks"),
        ),
    ),
    LearningStage(
        id="advanced",
        title="Practical Application Stage",
        description="Hands-on penetration testing, incident response, and real-world IoT security projects",
        duration="12-16 weeks",
        difficulty="Advanced",
        modules=(
            LearningModule(name="IoT Penetration Testing", duration="4 weeks"),
            LearningModule(name="Vulnerability Assessment Tools", duration="3 weeks"),
            LearningModule(name="Incident Response for IoT", duration="3 weeks"),
            LearningModule(name="Capstone Security Project", duration="4 weeks"),
        ),
    ),
]

CERTIFICATIONS: List[Certification] = [
    Certification(
        name="CompTIA Security+",
        provider="CompTIA",
        level="Entry",
        duration="3-6 months prep",
        rating=4.5,
    ),
    Certification(
        name="GIAC IoT Security Professional",
        provider="SANS/GIAC",
        level="Professional",
        duration="6-9 months prep",
        rating=4.8,
    ),
    Certification(
        name="Certified Ethical Hacker (CEH)",
        provider="EC-Council",
        level="Intermediate",
        duration="4-6 months prep",
        rating=4.3,
    ),
]

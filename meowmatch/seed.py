"""
카탈로그 시드 데이터

기본 보호소 한 곳과 카탈로그 화면의 샘플 고양이들을 등록합니다.
실행: flask --app run seed-cats
"""

import logging
import uuid
from dataclasses import asdict
from datetime import timedelta

import click
from flask import Flask, current_app

from meowmatch.models.shelter import Shelter
from meowmatch.utils.datetime_utils import DateTimeUtils

DEFAULT_SHELTER = {"name": "MeowMatch Shelter", "location": "Main Street"}

SAMPLE_CATS = [
    {"name": "Whiskers", "age": "kitten", "color": "orange", "size": "small", "gender": "male",
     "personality": ["playful", "affectionate"], "good_with": ["children", "dogs"],
     "description": "A mischievous orange tabby full of energy and love!",
     "image_url": "https://images.unsplash.com/photo-1574158622682-e40c69881006?w=300&h=250&fit=crop"},
    {"name": "Luna", "age": "young", "color": "black", "size": "medium", "gender": "female",
     "personality": ["calm", "affectionate"], "good_with": ["children", "other-cats"],
     "description": "A beautiful black cat with a serene temperament.",
     "image_url": "https://images.unsplash.com/photo-1519052537078-e6302a4968d4?w=300&h=250&fit=crop"},
    {"name": "Mittens", "age": "adult", "color": "white", "size": "small", "gender": "female",
     "personality": ["independent", "playful"], "good_with": ["other-cats"],
     "description": "Fluffy white cat who enjoys playtime and quiet moments.",
     "image_url": "https://images.unsplash.com/photo-1574144611937-0df059b5ef3e?w=300&h=250&fit=crop"},
    {"name": "Shadow", "age": "adult", "color": "gray", "size": "large", "gender": "male",
     "personality": ["calm", "affectionate"], "good_with": ["children", "dogs", "other-cats"],
     "description": "A gentle giant with a loving heart.",
     "image_url": "https://images.unsplash.com/photo-1535241749838-299bda431a63?w=300&h=250&fit=crop"},
    {"name": "Patches", "age": "young", "color": "calico", "size": "medium", "gender": "female",
     "personality": ["playful", "affectionate"], "good_with": ["children"],
     "description": "A colorful calico with boundless energy and charm.",
     "image_url": "https://images.unsplash.com/photo-1573865526014-f3550276626e?w=300&h=250&fit=crop"},
    {"name": "Oliver", "age": "kitten", "color": "tabby", "size": "small", "gender": "male",
     "personality": ["playful"], "good_with": ["children", "dogs"],
     "description": "Adorable tabby kitten ready for adventures!",
     "image_url": "https://images.unsplash.com/photo-1568152947382-f6f85e504b04?w=300&h=250&fit=crop"},
    {"name": "Princess", "age": "senior", "color": "siamese", "size": "small", "gender": "female",
     "personality": ["calm", "independent"], "good_with": ["other-cats"],
     "description": "Elegant Siamese senior looking for a quiet home.",
     "image_url": "https://images.unsplash.com/photo-1596854407944-bf87f6fdd49e?w=300&h=250&fit=crop"},
    {"name": "Simba", "age": "adult", "color": "orange", "size": "large", "gender": "male",
     "personality": ["affectionate", "playful"], "good_with": ["children", "dogs"],
     "description": "A majestic orange cat with a king-sized personality!",
     "image_url": "https://images.unsplash.com/photo-1608848461950-0fed8bed8311?w=300&h=250&fit=crop"},
    {"name": "Smokey", "age": "adult", "color": "gray", "size": "medium", "gender": "male",
     "personality": ["calm"], "good_with": ["other-cats"],
     "description": "Laid-back smokey gray cat perfect for relaxation.",
     "image_url": "https://images.unsplash.com/photo-1615751072497-5f5169febe17?w=300&h=250&fit=crop"},
    {"name": "Bella", "age": "young", "color": "black", "size": "small", "gender": "female",
     "personality": ["affectionate", "playful"], "good_with": ["children"],
     "description": "Sweet black cat with endless cuddles to give!",
     "image_url": "https://images.unsplash.com/photo-1519052537078-e6302a4968d4?w=300&h=250&fit=crop"},
    {"name": "Tiger", "age": "kitten", "color": "tabby", "size": "small", "gender": "male",
     "personality": ["playful"], "good_with": ["dogs"],
     "description": "Brave little tabby with tiger stripes!",
     "image_url": "https://images.unsplash.com/photo-1532386142143-f8e60652aee3?w=300&h=250&fit=crop"},
    {"name": "Snowball", "age": "senior", "color": "white", "size": "medium", "gender": "female",
     "personality": ["calm", "affectionate"], "good_with": ["children", "other-cats"],
     "description": "Gentle senior cat seeking a cozy retirement home.",
     "image_url": "https://images.unsplash.com/photo-1595433707802-6b2626ef1c91?w=300&h=250&fit=crop"},
]


def seed_cats(db) -> int:
    """
    카탈로그가 비어 있을 때만 보호소와 샘플 고양이를 등록합니다.
    생성한 고양이 수를 반환합니다 (이미 데이터가 있으면 0).
    """
    cats_ref = db.collection('cats')
    if next(cats_ref.limit(1).stream(), None) is not None:
        logging.info("[SEED] Cats already exist, skipping seed")
        return 0

    shelters_ref = db.collection('shelters')
    shelter_doc = next(shelters_ref.limit(1).stream(), None)
    if shelter_doc is None:
        shelter = Shelter(shelter_id=str(uuid.uuid4()), **DEFAULT_SHELTER)
        shelters_ref.document(shelter.shelter_id).set(DateTimeUtils.for_firestore(asdict(shelter)))
        shelter_id = shelter.shelter_id
        logging.info(f"[SEED] Created shelter {shelter_id}")
    else:
        shelter_id = shelter_doc.id

    # 최신 등록순 정렬 시 목록 순서대로 보이도록 첫 항목을 가장 최근으로
    base_time = DateTimeUtils.now()
    for index, sample in enumerate(SAMPLE_CATS):
        cat_id = str(uuid.uuid4())
        created_at = base_time - timedelta(minutes=index)
        cat_data = dict(sample, cat_id=cat_id, shelter_id=shelter_id, is_available=True,
                        created_at=created_at, updated_at=created_at)
        cats_ref.document(cat_id).set(DateTimeUtils.for_firestore(cat_data))

    logging.info(f"[SEED] Created {len(SAMPLE_CATS)} cats")
    return len(SAMPLE_CATS)


def register_commands(app: Flask) -> None:
    @app.cli.command('seed-cats')
    def seed_cats_command():
        """기본 보호소와 샘플 고양이를 등록합니다."""
        created = seed_cats(current_app.services['cats'].db)
        click.echo(f"Seeded {created} cats.")

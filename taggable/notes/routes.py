"""
Note routes and controllers
"""
from flask import Blueprint, request, jsonify
from taggable.config.config import logger
from taggable.core.exceptions import InvalidArgument, StoreError
from taggable.notes.models import Note, create_note
from taggable.utils.helpers import document_to_dict, parse_tag_list

# Create Blueprint
notes_bp = Blueprint('notes', __name__, url_prefix='/api/notes')

@notes_bp.errorhandler(InvalidArgument)
def handle_invalid_argument(error):
    return jsonify({'error': str(error)}), 400

@notes_bp.errorhandler(StoreError)
def handle_store_error(error):
    logger.error(f"Database error: {str(error)}")
    return jsonify({'error': 'Database error'}), 500

@notes_bp.route('', methods=['GET'])
def get_notes():
    """Get notes, optionally filtered by tags to include and exclude"""
    include_tags = parse_tag_list(request.args.get('include'))
    exclude_tags = parse_tag_list(request.args.get('exclude'))

    query = Note.filter_by_tags(Note.find(), include_tags, exclude_tags)

    return jsonify([document_to_dict(note) for note in query])

@notes_bp.route('', methods=['POST'])
def create_new_note():
    """Create a new note"""
    data = request.get_json(silent=True)
    title = data.get('title') if isinstance(data, dict) else None
    if not isinstance(title, str) or not title.strip():
        return jsonify({'error': 'Title is required'}), 400

    note = create_note(data)
    return jsonify(document_to_dict(note)), 201

@notes_bp.route('/<note_id>', methods=['GET'])
def get_note(note_id):
    """Get a specific note by ID"""
    note = Note.find_by_id(note_id)
    if not note:
        return jsonify({'error': 'Note not found'}), 404

    return jsonify(document_to_dict(note))

@notes_bp.route('/<note_id>/tags', methods=['POST'])
def add_note_tag(note_id):
    """Tag a note atomically"""
    data = request.get_json(silent=True)
    if not data or 'tag' not in data:
        return jsonify({'error': 'Tag is required'}), 400

    note = Note.find_by_id(note_id)
    if not note:
        return jsonify({'error': 'Note not found'}), 404

    added = note.add_tag_atomic(data['tag'])

    return jsonify({'added': added, 'tags': getattr(note, note.tags_path)})

@notes_bp.route('/<note_id>/tags/<tag>', methods=['DELETE'])
def remove_note_tag(note_id, tag):
    """Untag a note atomically"""
    note = Note.find_by_id(note_id)
    if not note:
        return jsonify({'error': 'Note not found'}), 404

    removed = note.remove_tag_atomic(tag)

    return jsonify({'removed': removed, 'tags': getattr(note, note.tags_path)})

#!/usr/bin/env python3
"""
Flask Web Application for Build WCTR
Provides a web UI and a REST API for ranking build steps by wall-clock time responsibility.
"""

from flask import Flask, render_template, request, jsonify
from werkzeug.utils import secure_filename
import logging
import os
import tempfile
from build_wctr import WctrAnalyzer, LogAnalysisError
from build_wctr.web import prepare_results

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = int(os.environ.get('BUILD_WCTR_MAX_UPLOAD_MB', '200')) * 1024 * 1024
app.config['UPLOAD_FOLDER'] = os.environ.get('BUILD_WCTR_UPLOAD_FOLDER', tempfile.gettempdir())

ALLOWED_EXTENSIONS = {'json', 'log', 'txt'}
LOG_FORMATS = ('auto', 'ninja', 'chrome')


def allowed_file(filename):
    if filename.endswith('ninja_log'):
        return True
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def _form_flag(name, default):
    value = request.form.get(name)
    if value is None:
        return default
    return value.lower() in ('true', 'on', '1')


def _analyze_upload(file):
    """
    Save an uploaded log, analyze it and return the prepared results.

    Raises:
        ValueError: If a form field is invalid
        LogAnalysisError: If the log cannot be analyzed
    """
    num_lines = request.form.get('num_lines', '0') or '0'
    if not num_lines.isdigit():
        raise ValueError('num_lines must be a non-negative integer')
    log_format = request.form.get('log_format', 'auto')
    if log_format not in LOG_FORMATS:
        raise ValueError(f"log_format must be one of: {', '.join(LOG_FORMATS)}")

    analyzer = WctrAnalyzer(
        num_lines=int(num_lines),
        log_format=log_format,
        last_build_only=_form_flag('last_build_only', False)
    )

    fd, filepath = tempfile.mkstemp(prefix='wctr_', dir=app.config['UPLOAD_FOLDER'])
    os.close(fd)
    try:
        file.save(filepath)
        analyzer.process_log_file(filepath)
    finally:
        os.remove(filepath)

    return prepare_results(analyzer)


@app.route('/')
def index():
    """Main page with file upload form."""
    return render_template('index.html')


@app.route('/health')
def health():
    return jsonify({'status': 'ok'})


@app.route('/api/analyze', methods=['POST'])
def analyze_api():
    """
    API endpoint to analyze a build log.
    Accepts: multipart/form-data with fields:
      - 'file': .ninja_log or Chrome trace JSON file
      - 'num_lines': number of tasks to return, 0 for all (optional, default: 0)
      - 'log_format': 'auto'|'ninja'|'chrome' (optional, default: 'auto')
      - 'last_build_only': 'true'|'false' (optional, default: 'false')
    Returns: JSON with analysis results
    """
    if 'file' not in request.files:
        return jsonify({'error': 'No file provided'}), 400

    file = request.files['file']

    if not file.filename:
        return jsonify({'error': 'No file selected'}), 400

    if not allowed_file(file.filename):
        return jsonify({'error': 'Invalid file type. Upload a .ninja_log or a JSON trace.'}), 400

    try:
        results = _analyze_upload(file)
    except (ValueError, LogAnalysisError) as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.exception("Analysis of %s failed", file.filename)
        return jsonify({'error': str(e)}), 500

    return jsonify(results)


@app.route('/analyze', methods=['POST'])
def analyze_web():
    """
    Web endpoint to analyze a build log.
    Accepts: the same multipart/form-data fields as /api/analyze
    Returns: HTML results page
    """
    if 'file' not in request.files:
        return render_template('index.html', error='No file provided')

    file = request.files['file']

    if not file.filename:
        return render_template('index.html', error='No file selected')

    if not allowed_file(file.filename):
        return render_template('index.html', error='Invalid file type. Upload a .ninja_log or a JSON trace.')

    try:
        results = _analyze_upload(file)
    except (ValueError, LogAnalysisError) as e:
        return render_template('index.html', error=f'Error analyzing file: {str(e)}')
    except Exception as e:
        logger.exception("Analysis of %s failed", file.filename)
        return render_template('index.html', error=f'Error analyzing file: {str(e)}')

    return render_template('results.html',
                           filename=secure_filename(file.filename),
                           results=results)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, host='0.0.0.0', port=5001)

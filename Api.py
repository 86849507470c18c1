from flask import Flask, request, jsonify
import logging

import pydantic

import config
from errors import FlowError
from models.detection import DetectionRequest
from models.paper import ResearchRequest
from pipeline import FakeNewsDetectionPipeline, ResearchPaperPipeline
from Agents.Agent import create_client

logger = logging.getLogger(__name__)


def _validation_message(e: pydantic.ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())


def create_app(client=None):
    """
    Build the Flask app. The Gemini client is created once here
    and shared by both pipelines.
    """
    app = Flask(__name__)
    client = client or create_client()
    detection_pipeline = FakeNewsDetectionPipeline(client)
    paper_pipeline = ResearchPaperPipeline(client)

    @app.route('/detect_fake_news', methods=['POST'])
    def detect_fake_news():
        """
        Classify an article text or URL as Real or Fake.

        Expected input: JSON with 'input' field
        Returns: JSON with result, score, cleanedInput, reasoning
        """
        data = request.get_json(silent=True)
        if not data or 'input' not in data:
            return jsonify({'error': 'Missing input in request body'}), 400
        try:
            detection_request = DetectionRequest.model_validate(data)
        except pydantic.ValidationError as e:
            return jsonify({'error': _validation_message(e)}), 400

        logger.info(f"Detecting fake news for input: {detection_request.input[:100]}...")
        try:
            result = detection_pipeline.detect(detection_request.input)
        except FlowError as e:
            return jsonify({'error': str(e)}), 500

        return jsonify(result.to_dict())

    @app.route('/generate_research_paper', methods=['POST'])
    def generate_research_paper():
        """
        Generate a research paper.

        Expected input: JSON with 'topic' and optional 'style', 'word_count'
        Returns: JSON research paper (title, abstract, sections, references)
        """
        data = request.get_json(silent=True)
        if not data or 'topic' not in data:
            return jsonify({'error': 'Missing topic in request body'}), 400
        try:
            research_request = ResearchRequest.model_validate(data)
        except pydantic.ValidationError as e:
            return jsonify({'error': _validation_message(e)}), 400

        logger.info(f"Generating research paper on: {research_request.topic[:100]}")
        try:
            paper = paper_pipeline.generate(
                research_request.topic,
                style=research_request.style,
                word_count=research_request.word_count,
            )
        except FlowError as e:
            return jsonify({'error': str(e)}), 500

        return jsonify(paper.model_dump(mode='json'))

    @app.route('/health', methods=['GET'])
    def health_check():
        """Simple health check endpoint"""
        return jsonify({'status': 'healthy', 'message': 'Veritas API is running'})

    return app


if __name__ == '__main__':
    logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    logger.info("Starting Veritas API...")
    logger.info("  POST /detect_fake_news - Fake news detection")
    logger.info("  POST /generate_research_paper - Research paper generation")
    logger.info("  GET  /health - Health check")
    create_app().run(host=config.API_HOST, port=config.API_PORT)

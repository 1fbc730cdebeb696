import json

import pytest

from keyrank.__main__ import main
from keyrank.app import rank_files
from keyrank.configuration.config import Config


def write_document(path, text, keywords=()):
    sentences = [[{'text': word} for word in sentence.split()] for sentence in text.split('.') if sentence.strip()]
    path.write_text(json.dumps({'sentences': sentences, 'keywords': list(keywords)}), encoding='utf-8')
    return path


def test_rank_files_writes_back(tmp_path):
    path = write_document(tmp_path / 'doc.json', 'What goes around comes around')
    outputs = rank_files([path], Config())
    data = json.loads(path.read_text(encoding='utf-8'))
    assert data['textrank'][0][0] == 'around'
    assert outputs[path] == {'textrank': data['textrank']}


def test_rank_files_evaluates(tmp_path):
    path = write_document(tmp_path / 'doc.json', 'Henry is bad at golf', keywords=['golf'])
    rank_files([path], Config(mode='ngrams', evaluate=True, output_field='phrases'))
    data = json.loads(path.read_text(encoding='utf-8'))
    assert len(data['phrases']) == 3
    matches = data['phrases_matches']
    assert [(match['keyword'], match['term']) for match in matches] == [('golf', 'bad at golf')]
    assert matches[0]['distance'] == pytest.approx(7 / 15)
    assert matches[0]['overlap'] == 1.
    assert matches[0]['score'] > 0


def test_rank_files_evaluates_without_writing(tmp_path):
    path = write_document(tmp_path / 'doc.json', 'What goes around comes around', keywords=['Around'])
    outputs = rank_files([path], Config(evaluate=True), write=False)
    matches = outputs[path]['textrank_matches']
    assert len(matches) == 1
    assert matches[0]['keyword'] == 'Around'
    assert matches[0]['term'] == 'around'
    assert matches[0]['score'] == pytest.approx(1.2)
    assert 'textrank_matches' not in json.loads(path.read_text(encoding='utf-8'))


def test_rank_files_without_keywords(tmp_path):
    path = write_document(tmp_path / 'doc.json', 'What goes around comes around')
    outputs = rank_files([path], Config(evaluate=True), write=False)
    assert outputs[path]['textrank_matches'] == []


def test_rank_files_logs(tmp_path):
    path = write_document(tmp_path / 'doc.json', 'What goes around comes around')
    log_path = tmp_path / 'run.log'
    rank_files([path], Config(log_path=str(log_path)), write=False)
    assert 'keywords 3' in log_path.read_text()
    assert 'textrank' not in json.loads(path.read_text(encoding='utf-8'))


def test_missing_sentences(tmp_path):
    path = tmp_path / 'doc.json'
    path.write_text('{}', encoding='utf-8')
    with pytest.raises(KeyError):
        rank_files([path], Config())


def test_main_prints(tmp_path, capsys):
    path = write_document(tmp_path / 'doc.json', 'What goes around comes around')
    assert main([str(path), '--print', '--limit', '1']) == 0
    printed = json.loads(capsys.readouterr().out)
    assert list(printed) == [str(path)]
    assert [text for text, _ in printed[str(path)]['textrank']] == ['around']
    assert 'textrank' not in json.loads(path.read_text(encoding='utf-8'))


def test_main_prints_matches(tmp_path, capsys):
    path = write_document(tmp_path / 'doc.json', 'Henry is bad at golf', keywords=['golf'])
    assert main([str(path), '--mode', 'ngrams', '--evaluate', '--print']) == 0
    printed = json.loads(capsys.readouterr().out)[str(path)]
    assert len(printed['textrank']) == 3
    assert printed['textrank_matches'][0]['term'] == 'bad at golf'
    assert 'textrank_matches' not in json.loads(path.read_text(encoding='utf-8'))

def get_app_html() -> str:
	return '''<!DOCTYPE html>
<html lang="en">
<head>
	<meta charset="UTF-8">
	<meta name="viewport" content="width=device-width, initial-scale=1.0">
	<title>CareerHub</title>
	<link rel="stylesheet" href="https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.4.0/css/all.min.css">
	<style>
		* { margin: 0; padding: 0; box-sizing: border-box; }
		:root {
			--bg-0: #0f172a; --bg-1: #1e293b; --bg-2: #334155;
			--text-0: #f1f5f9; --text-1: #cbd5e1; --text-2: #94a3b8;
			--accent: #3b82f6; --accent-2: #60a5fa;
			--success: #10b981; --warning: #f59e0b; --error: #ef4444;
			--border: #475569;
			--radius: 0.375rem;
			--mono: 'JetBrains Mono', 'Fira Code', monospace;
		}
		body { font-family: 'Inter', system-ui, -apple-system, sans-serif; background: var(--bg-0); color: var(--text-0); height: 100vh; display: flex; flex-direction: column; overflow: hidden; }
		header { background: var(--bg-1); padding: 0.75rem 1.5rem; border-bottom: 1px solid var(--border); display: flex; align-items: center; justify-content: space-between; }
		.logo { font-weight: 700; font-size: 1.2rem; color: var(--accent-2); }
		.logo i { margin-right: 0.5rem; }
		.header-actions { display: flex; gap: 0.5rem; align-items: center; }

		#main { flex: 1; display: flex; overflow: hidden; }
		#graph-pane { width: 35%; position: relative; background: var(--bg-1); overflow: hidden; }
		#editor-pane { width: 30%; display: flex; flex-direction: column; background: var(--bg-1); overflow: hidden; }
		#editor-pane.collapsed { display: none; }
		#kanban-pane { flex: 1; display: flex; gap: 1rem; padding: 1rem; overflow-x: auto; }
		.resizer { width: 6px; background: var(--border); cursor: col-resize; }
		.resizer:hover { background: var(--accent); }
		.resizer.hidden { display: none; }

		.btn { display: flex; align-items: center; justify-content: center; gap: 0.5rem; background: var(--bg-2); color: var(--text-0); border: 1px solid var(--border); border-radius: var(--radius); padding: 0.5rem 0.9rem; font-size: 0.85rem; cursor: pointer; }
		.btn:hover { background: var(--accent); }
		.btn-primary { background: var(--accent); border-color: var(--accent-2); }
		.btn-primary:hover { background: var(--accent-2); }

		#graph { width: 100%; height: 100%; }
		#graph-buttons { position: absolute; top: 1rem; left: 1rem; display: flex; flex-direction: column; gap: 0.5rem; }
		#graph-hint { position: absolute; bottom: 0.75rem; left: 1rem; font-size: 0.75rem; color: var(--text-2); }
		.node { stroke: #333; stroke-width: 1.5px; cursor: pointer; }
		.node:hover { stroke: var(--accent); stroke-width: 2.5px; }
		.node.selected { stroke: var(--warning); stroke-width: 3px; }
		.link { stroke: #999; stroke-opacity: 0.6; stroke-width: 1.5px; }
		.label { pointer-events: none; user-select: none; font-size: 12px; fill: #ccc; }

		#doc-bar { padding: 1rem; display: flex; gap: 0.5rem; align-items: center; border-bottom: 1px solid var(--border); }
		select { flex: 1; background: var(--bg-2); color: var(--text-0); border: 1px solid var(--border); border-radius: var(--radius); padding: 0.45rem; }
		#editor, #preview { flex: 1; background: var(--bg-0); color: var(--text-0); padding: 1.25rem; border: none; outline: none; resize: none; overflow: auto; }
		#editor { font-family: var(--mono); font-size: 0.9rem; line-height: 1.5; }
		#editor:disabled { opacity: 0.5; }
		#preview { display: none; line-height: 1.6; }
		#preview.visible { display: block; }
		#preview h1, #preview h2, #preview h3 { margin: 0.75rem 0 0.5rem; }
		#preview p, #preview ul, #preview ol { margin-bottom: 0.6rem; }
		#preview ul, #preview ol { padding-left: 1.25rem; }
		#preview code { font-family: var(--mono); background: var(--bg-2); padding: 0 0.2rem; }

		.kanban-column { flex: 1; min-width: 260px; background: var(--bg-1); border: 1px solid var(--border); border-radius: 0.5rem; display: flex; flex-direction: column; overflow: hidden; }
		.kanban-column.drag-over { box-shadow: 0 0 0 2px var(--accent); }
		.kanban-header { padding: 1rem; font-weight: 600; display: flex; justify-content: space-between; border-bottom: 1px solid var(--border); }
		.kanban-header i { margin-right: 0.5rem; opacity: 0.7; }
		#todo-column .kanban-header { color: var(--accent); }
		#inprogress-column .kanban-header { color: var(--warning); }
		#done-column .kanban-header { color: var(--success); }
		.kanban-list { flex: 1; padding: 1rem; overflow-y: auto; display: flex; flex-direction: column; gap: 0.75rem; }
		.kanban-footer { padding: 0.75rem; border-top: 1px solid var(--border); }
		.issue-card { position: relative; background: var(--bg-2); border: 1px solid var(--border); border-radius: var(--radius); padding: 1rem; cursor: move; }
		.issue-title { font-weight: 600; margin-bottom: 0.5rem; padding-right: 1.5rem; }
		.issue-desc { font-size: 0.85rem; color: var(--text-1); white-space: pre-line; }
		.delete-issue-btn { position: absolute; top: 0.5rem; right: 0.5rem; width: 24px; height: 24px; border-radius: 50%; border: none; background: var(--error); color: #fff; cursor: pointer; opacity: 0; }
		.issue-card:hover .delete-issue-btn { opacity: 1; }

		.toast { position: fixed; bottom: 20px; right: 20px; background: var(--bg-2); padding: 1rem; border-radius: var(--radius); border-left: 4px solid var(--accent); display: flex; gap: 0.5rem; align-items: center; transform: translateY(100px); opacity: 0; transition: all 0.3s ease; z-index: 1000; }
		.toast.show { transform: translateY(0); opacity: 1; }
		.toast.success { border-left-color: var(--success); }
		.toast.error { border-left-color: var(--error); }

		@media (max-width: 768px) {
			#main { flex-direction: column; }
			#graph-pane, #editor-pane { width: 100%; height: 33vh; }
			.resizer { display: none; }
		}
	</style>
</head>
<body>
	<header>
		<div class="logo"><i class="fas fa-code-branch"></i>CareerHub</div>
		<div class="header-actions">
			<button id="toggle-editor-btn" class="btn"><i class="fas fa-window-minimize"></i> Toggle Editor</button>
		</div>
	</header>

	<div id="main">
		<div id="graph-pane">
			<svg id="graph"></svg>
			<div id="graph-buttons">
				<button id="add-node-btn" class="btn"><i class="fas fa-plus-circle"></i> Add Node</button>
				<button id="add-colored-node-btn" class="btn"><i class="fas fa-palette"></i> Add Colored Node</button>
				<button id="save-graph-btn" class="btn btn-primary"><i class="fas fa-save"></i> Save Graph</button>
			</div>
			<div id="graph-hint">Shift-click two nodes to link or unlink. Double-click to delete.</div>
		</div>

		<div class="resizer" id="resizer1"></div>

		<div id="editor-pane">
			<div id="doc-bar">
				<select id="select-doc"><option value="">-- Select Document --</option></select>
				<button id="new-doc-btn" class="btn"><i class="fas fa-file"></i> New</button>
				<button id="preview-btn" class="btn"><i class="fas fa-eye"></i> Preview</button>
				<button id="commit-doc-btn" class="btn btn-primary"><i class="fas fa-save"></i> Commit</button>
			</div>
			<textarea id="editor" placeholder="Select or create a document..." disabled></textarea>
			<div id="preview"></div>
		</div>

		<div class="resizer" id="resizer2"></div>

		<div id="kanban-pane">
			<div class="kanban-column" id="todo-column" data-status="todo">
				<div class="kanban-header"><div><i class="fas fa-clipboard-list"></i>To Do</div><span id="todo-counter">0</span></div>
				<div class="kanban-list" id="todo-list"></div>
				<div class="kanban-footer"><button class="btn btn-primary add-issue-btn" style="width: 100%"><i class="fas fa-plus"></i> Add Task</button></div>
			</div>
			<div class="kanban-column" id="inprogress-column" data-status="in-progress">
				<div class="kanban-header"><div><i class="fas fa-spinner"></i>In Progress</div><span id="inprogress-counter">0</span></div>
				<div class="kanban-list" id="inprogress-list"></div>
				<div class="kanban-footer"><button class="btn btn-primary add-issue-btn" style="width: 100%"><i class="fas fa-plus"></i> Add Task</button></div>
			</div>
			<div class="kanban-column" id="done-column" data-status="done">
				<div class="kanban-header"><div><i class="fas fa-check-circle"></i>Done</div><span id="done-counter">0</span></div>
				<div class="kanban-list" id="done-list"></div>
				<div class="kanban-footer"><button class="btn btn-primary add-issue-btn" style="width: 100%"><i class="fas fa-plus"></i> Add Task</button></div>
			</div>
		</div>
	</div>

	<div id="toast" class="toast"><i id="toast-icon" class="fas fa-info-circle"></i><span id="toast-message"></span></div>

	<script src="https://cdn.jsdelivr.net/npm/d3@7.8.5/dist/d3.min.js"></script>
	<script src="https://cdn.jsdelivr.net/npm/marked/marked.min.js"></script>
	<script>
		// ============ Shared ============

		function showToast(message, type = 'info') {
			const toast = document.getElementById('toast');
			const icon = document.getElementById('toast-icon');
			toast.className = 'toast';
			if (type === 'success') {
				toast.classList.add('success');
				icon.className = 'fas fa-check-circle';
			} else if (type === 'error') {
				toast.classList.add('error');
				icon.className = 'fas fa-exclamation-circle';
			} else {
				icon.className = 'fas fa-info-circle';
			}
			document.getElementById('toast-message').textContent = message;
			toast.classList.add('show');
			setTimeout(() => toast.classList.remove('show'), 3000);
		}

		async function api(method, url, body) {
			const opts = { method, headers: {} };
			if (body !== undefined) {
				opts.headers['Content-Type'] = 'application/json';
				opts.body = JSON.stringify(body);
			}
			const res = await fetch(url, opts);
			const data = await res.json();
			if (!res.ok) throw new Error(data.error || res.statusText);
			return data;
		}

		function escapeHtml(text) {
			const div = document.createElement('div');
			div.textContent = text == null ? '' : String(text);
			return div.innerHTML;
		}

		// ============ Layout ============

		const graphPane = document.getElementById('graph-pane');
		const editorPane = document.getElementById('editor-pane');
		const resizer2 = document.getElementById('resizer2');

		function makeResizer(resizer, pane) {
			resizer.addEventListener('mousedown', e => {
				e.preventDefault();
				let width = pane.getBoundingClientRect().width;
				const move = ev => {
					width = Math.max(100, width + ev.movementX);
					pane.style.width = width + 'px';
				};
				const up = () => {
					document.removeEventListener('mousemove', move);
					document.removeEventListener('mouseup', up);
					updateSvgSize();
				};
				document.addEventListener('mousemove', move);
				document.addEventListener('mouseup', up);
			});
		}
		makeResizer(document.getElementById('resizer1'), graphPane);
		makeResizer(resizer2, editorPane);

		document.getElementById('toggle-editor-btn').addEventListener('click', () => {
			editorPane.classList.toggle('collapsed');
			resizer2.classList.toggle('hidden', editorPane.classList.contains('collapsed'));
		});

		// ============ Graph ============
		// Links hold node ids; nodeById resolves them for rendering only.

		const RADIUS = 18;
		const DEFAULT_COLOR = '#2ecc71';
		const svg = d3.select('#graph');
		const simulation = d3.forceSimulation()
			.force('link', d3.forceLink().id(d => d.id).distance(120))
			.force('charge', d3.forceManyBody().strength(-80))
			.force('center', d3.forceCenter())
			.force('collision', d3.forceCollide().radius(30));

		let graph = { nodes: [], links: [] };
		let nodeById = new Map();
		let selectedNode = null;

		svg.call(d3.zoom().scaleExtent([0.1, 4]).on('zoom', event => {
			svg.select('g.viewport').attr('transform', event.transform);
		}));

		function endpointId(endpoint) {
			return endpoint !== null && typeof endpoint === 'object' ? endpoint.id : endpoint;
		}

		function setGraph(data) {
			graph = {
				nodes: (data && data.nodes) || [],
				links: ((data && data.links) || []).map(l => ({ source: endpointId(l.source), target: endpointId(l.target) }))
			};
			nodeById = new Map(graph.nodes.map(n => [n.id, n]));
		}

		function updateSvgSize() {
			const width = graphPane.clientWidth;
			const height = graphPane.clientHeight;
			svg.attr('width', width).attr('height', height);
			simulation.force('center', d3.forceCenter(width / 2, height / 2));
			if (graph.nodes.length > 0) simulation.alpha(0.3).restart();
		}
		window.addEventListener('resize', updateSvgSize);

		function clamp(value, size) {
			return Math.max(RADIUS, Math.min(size - RADIUS, value));
		}

		function findLink(a, b) {
			return graph.links.findIndex(l =>
				(l.source === a && l.target === b) || (l.source === b && l.target === a));
		}

		function onShiftClick(id) {
			if (selectedNode === null) {
				selectedNode = id;
			} else if (selectedNode === id) {
				selectedNode = null;
			} else {
				const index = findLink(selectedNode, id);
				if (index >= 0) {
					graph.links.splice(index, 1);
				} else {
					graph.links.push({ source: selectedNode, target: id });
				}
				selectedNode = null;
			}
			renderGraph();
		}

		function deleteNode(id) {
			const node = nodeById.get(id);
			if (!confirm(`Delete node "${node.name}"?`)) return;
			graph.nodes = graph.nodes.filter(n => n.id !== id);
			graph.links = graph.links.filter(l => l.source !== id && l.target !== id);
			nodeById.delete(id);
			if (selectedNode === id) selectedNode = null;
			renderGraph();
		}

		function renderGraph() {
			svg.selectAll('*').remove();
			const root = svg.append('g').attr('class', 'viewport');

			root.append('defs').append('marker')
				.attr('id', 'arrowhead')
				.attr('viewBox', '0 -5 10 10')
				.attr('refX', 23).attr('refY', 0)
				.attr('orient', 'auto')
				.attr('markerWidth', 6).attr('markerHeight', 6)
				.append('path').attr('d', 'M 0,-5 L 10,0 L 0,5').attr('fill', '#999');

			const drawn = graph.links
				.filter(l => nodeById.has(l.source) && nodeById.has(l.target))
				.map(l => ({ source: nodeById.get(l.source), target: nodeById.get(l.target) }));

			const link = root.selectAll('.link').data(drawn).enter()
				.append('line').attr('class', 'link').attr('marker-end', 'url(#arrowhead)');

			const node = root.selectAll('.node').data(graph.nodes, d => d.id).enter()
				.append('circle')
				.attr('class', d => d.id === selectedNode ? 'node selected' : 'node')
				.attr('r', RADIUS)
				.attr('fill', d => d.color || DEFAULT_COLOR)
				.on('click', (event, d) => { if (event.shiftKey) onShiftClick(d.id); })
				.on('dblclick', (event, d) => { event.stopPropagation(); deleteNode(d.id); })
				.call(d3.drag()
					.on('start', (event, d) => {
						if (!event.active) simulation.alphaTarget(0.3).restart();
						d.fx = d.x; d.fy = d.y;
					})
					.on('drag', (event, d) => {
						d.x = d.fx = clamp(event.x, graphPane.clientWidth);
						d.y = d.fy = clamp(event.y, graphPane.clientHeight);
					})
					.on('end', (event, d) => {
						if (!event.active) simulation.alphaTarget(0);
						d.fx = null; d.fy = null;
					}));

			const label = root.selectAll('.label').data(graph.nodes, d => d.id).enter()
				.append('text').attr('class', 'label').text(d => d.name || 'Node');

			simulation.nodes(graph.nodes).on('tick', () => {
				const width = graphPane.clientWidth;
				const height = graphPane.clientHeight;
				graph.nodes.forEach(d => { d.x = clamp(d.x, width); d.y = clamp(d.y, height); });
				link.attr('x1', d => d.source.x).attr('y1', d => d.source.y)
					.attr('x2', d => d.target.x).attr('y2', d => d.target.y);
				node.attr('cx', d => d.x).attr('cy', d => d.y);
				label.attr('x', d => d.x + 20).attr('y', d => d.y + 5);
			});
			simulation.force('link').links(drawn);
			simulation.alpha(1).restart();
		}

		function graphPayload() {
			return {
				nodes: graph.nodes.map(({ index, vx, vy, fx, fy, ...rest }) => rest),
				links: graph.links.map(l => ({ source: l.source, target: l.target }))
			};
		}

		function loadGraph() {
			api('GET', '/api/graph')
				.then(data => { setGraph(data); renderGraph(); updateSvgSize(); })
				.catch(err => {
					console.error('Error loading graph:', err);
					showToast('Failed to load graph data', 'error');
				});
		}

		function saveGraph() {
			api('POST', '/api/graph', graphPayload())
				.then(() => showToast('Graph saved successfully!', 'success'))
				.catch(err => {
					console.error('Graph save error:', err);
					showToast('Graph save failed.', 'error');
				});
		}

		function addNode(withColor) {
			const name = prompt('Enter node name:');
			if (!name) return;
			const node = { id: 'n_' + Date.now(), name, x: graphPane.clientWidth / 2, y: graphPane.clientHeight / 2 };
			if (withColor) node.color = prompt('Enter node color (e.g. "#ff0000" or "blue"):') || DEFAULT_COLOR;
			graph.nodes.push(node);
			nodeById.set(node.id, node);
			renderGraph();
		}

		document.getElementById('save-graph-btn').addEventListener('click', saveGraph);
		document.getElementById('add-node-btn').addEventListener('click', () => addNode(false));
		document.getElementById('add-colored-node-btn').addEventListener('click', () => addNode(true));

		// ============ Documents ============

		let currentDoc = null;
		const docSelect = document.getElementById('select-doc');
		const editor = document.getElementById('editor');
		const preview = document.getElementById('preview');

		function latestContent(doc) {
			const version = doc.versions[doc.currentVersion];
			return version ? (version.content || '') : '';
		}

		function showDocument(doc) {
			currentDoc = doc;
			editor.disabled = doc === null;
			editor.value = doc === null ? '' : latestContent(doc);
			if (preview.classList.contains('visible')) renderPreview();
		}

		function renderPreview() {
			preview.innerHTML = marked.parse(editor.value);
		}

		function loadDocuments(selectId) {
			return api('GET', '/api/documents')
				.then(docs => {
					docSelect.innerHTML = '<option value="">-- Select Document --</option>';
					docs.forEach(doc => {
						const opt = document.createElement('option');
						opt.value = doc.docId;
						opt.textContent = doc.title;
						docSelect.appendChild(opt);
					});
					if (selectId) docSelect.value = selectId;
				})
				.catch(err => {
					console.error('Error loading documents:', err);
					showToast('Failed to load documents', 'error');
				});
		}

		docSelect.addEventListener('change', () => {
			const docId = docSelect.value;
			if (!docId) {
				showDocument(null);
				return;
			}
			api('GET', `/api/documents/${encodeURIComponent(docId)}`)
				.then(showDocument)
				.catch(err => showToast(`Failed to load document: ${err.message}`, 'error'));
		});

		document.getElementById('new-doc-btn').addEventListener('click', () => {
			const title = prompt('New Document Title:');
			if (!title) return;
			api('POST', '/api/documents', { title, content: '' })
				.then(doc => { showDocument(doc); return loadDocuments(doc.docId); })
				.catch(err => showToast(`Failed to create document: ${err.message}`, 'error'));
		});

		document.getElementById('commit-doc-btn').addEventListener('click', () => {
			if (!currentDoc) {
				showToast('No document selected.', 'error');
				return;
			}
			api('POST', `/api/documents/${encodeURIComponent(currentDoc.docId)}/commit`, { content: editor.value })
				.then(doc => {
					currentDoc = doc;
					showToast(`Document committed. Version count: ${doc.versions.length}`, 'success');
				})
				.catch(err => {
					console.error('Commit error:', err);
					showToast('Failed to commit document.', 'error');
				});
		});

		document.getElementById('preview-btn').addEventListener('click', () => {
			const visible = preview.classList.toggle('visible');
			editor.style.display = visible ? 'none' : '';
			if (visible) renderPreview();
		});

		// ============ Kanban ============

		const COLUMNS = { 'todo': 'todo', 'in-progress': 'inprogress', 'done': 'done' };

		function loadIssues() {
			api('GET', '/api/issues')
				.then(renderIssues)
				.catch(err => {
					console.error('Error loading issues:', err);
					showToast('Failed to load issues', 'error');
				});
		}

		function renderIssues(issues) {
			Object.values(COLUMNS).forEach(key => {
				document.getElementById(`${key}-list`).innerHTML = '';
				document.getElementById(`${key}-counter`).textContent =
					issues.filter(i => COLUMNS[i.status] === key).length;
			});

			issues.forEach(issue => {
				const card = document.createElement('div');
				card.className = 'issue-card';
				card.draggable = true;
				card.dataset.issueId = issue.issueId;
				card.innerHTML = `
					<button class="delete-issue-btn"><i class="fas fa-times"></i></button>
					<div class="issue-title">${escapeHtml(issue.title)}</div>
					<div class="issue-desc">${escapeHtml(issue.description)}</div>`;
				card.querySelector('.delete-issue-btn').addEventListener('click', e => deleteIssue(e, issue.issueId));
				card.addEventListener('dragstart', e => e.dataTransfer.setData('text/plain', issue.issueId));
				const key = COLUMNS[issue.status] || 'done';
				document.getElementById(`${key}-list`).appendChild(card);
			});
		}

		function createIssuePrompt(status) {
			const title = prompt('Issue title:');
			if (!title) return;
			const description = prompt('Issue description:');
			api('POST', '/api/issues', { title, description, status })
				.then(loadIssues)
				.catch(err => showToast(`Failed to create issue: ${err.message}`, 'error'));
		}

		function deleteIssue(e, issueId) {
			e.stopPropagation();
			if (!confirm('Delete this issue?')) return;
			api('DELETE', `/api/issues/${encodeURIComponent(issueId)}`)
				.then(result => { if (result.success) loadIssues(); })
				.catch(err => showToast(`Failed to delete issue: ${err.message}`, 'error'));
		}

		document.querySelectorAll('.kanban-column').forEach(column => {
			const status = column.dataset.status;
			column.querySelector('.add-issue-btn').addEventListener('click', () => createIssuePrompt(status));
			column.addEventListener('dragover', e => { e.preventDefault(); column.classList.add('drag-over'); });
			column.addEventListener('dragleave', () => column.classList.remove('drag-over'));
			column.addEventListener('drop', e => {
				e.preventDefault();
				column.classList.remove('drag-over');
				const issueId = e.dataTransfer.getData('text/plain');
				api('PUT', `/api/issues/${encodeURIComponent(issueId)}`, { status })
					.then(loadIssues)
					.catch(err => showToast(`Failed to move issue: ${err.message}`, 'error'));
			});
		});

		// ============ Init ============

		loadGraph();
		loadDocuments();
		loadIssues();
	</script>
</body>
</html>'''

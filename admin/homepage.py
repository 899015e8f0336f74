from fastapi import APIRouter, Response

router = APIRouter()

DASHBOARD_HTML = """
<html>
  <head>
    <title>Auto-Reply Dashboard</title>
    <style>
      body { font-family: system-ui, sans-serif; background: #f8fafc; color: #222; margin: 0; padding: 2rem; }
      .grid { display: grid; grid-template-columns: 1fr 1fr; gap: 1.5rem; }
      .card { background: #fff; border-radius: 1rem; box-shadow: 0 4px 24px #0001; padding: 1.5rem; }
      h1 { color: #16a34a; font-size: 1.6rem; margin: 0 0 .25rem; }
      h2 { font-size: 1.1rem; margin-top: 0; }
      textarea, input { width: 100%; font-family: monospace; font-size: .85rem; border: 1px solid #ddd; border-radius: .5rem; padding: .5rem; box-sizing: border-box; }
      button { margin-top: .5rem; border: 0; border-radius: .5rem; padding: .5rem 1rem; background: #16a34a; color: #fff; font-weight: 600; cursor: pointer; }
      button.secondary { background: #e2e8f0; color: #222; }
      ul { list-style: none; padding: 0; max-height: 420px; overflow-y: auto; font-size: .8rem; color: #475569; }
      .intent { border: 1px solid #e2e8f0; border-radius: .5rem; padding: .75rem; margin-bottom: .75rem; background: #f8fafc; }
      .intent input, .intent textarea { margin-top: .4rem; }
      .intent .remove { background: none; color: #dc2626; padding: 0; }
      #preview { font-size: .9rem; margin-top: .5rem; }
    </style>
  </head>
  <body>
    <h1 id="bizName"></h1>
    <a id="bizSite" href="#"></a>
    <div class="grid">
      <div class="card">
        <h2>Intents</h2>
        <div id="intentsList"></div>
        <button id="addIntent" class="secondary">Add intent</button>
        <button id="saveBtn">Save</button>
        <button id="resetBtn" class="secondary">Reset</button>
        <h2 style="margin-top:1.5rem">Preview</h2>
        <input id="previewInput" placeholder="Type a customer message" />
        <button id="previewBtn" class="secondary">Check intent</button>
        <div id="preview"></div>
      </div>
      <div class="card">
        <h2>Recent messages</h2>
        <button id="refreshLogs" class="secondary">Refresh</button>
        <ul id="logs"></ul>
        <h2>Send test message</h2>
        <input id="testTo" placeholder="whatsapp:+15551234567" />
        <input id="testMsg" placeholder="Message" style="margin-top:.5rem" />
        <button id="sendTest">Send</button>
      </div>
    </div>
    <script>
      const $ = (id) => document.getElementById(id);
      let INTENTS = [];

      function intentCard(intent, idx) {
        const card = document.createElement('div');
        card.className = 'intent';
        const name = document.createElement('input');
        name.placeholder = 'Intent name';
        name.value = intent.name || '';
        name.addEventListener('input', () => { INTENTS[idx].name = name.value; });
        const patterns = document.createElement('input');
        patterns.placeholder = 'keywords, comma separated';
        patterns.value = (intent.patterns || []).filter(Boolean).join(', ');
        patterns.addEventListener('input', () => {
          INTENTS[idx].patterns = patterns.value.split(',').map((s) => s.trim()).filter(Boolean);
        });
        const reply = document.createElement('textarea');
        reply.rows = 2;
        reply.placeholder = 'Reply text';
        reply.value = intent.reply || '';
        reply.addEventListener('input', () => { INTENTS[idx].reply = reply.value; });
        const remove = document.createElement('button');
        remove.className = 'remove';
        remove.textContent = 'Remove';
        remove.addEventListener('click', () => { INTENTS.splice(idx, 1); renderIntents(); });
        card.append(name, patterns, reply, remove);
        return card;
      }

      function renderIntents() {
        $('intentsList').innerHTML = '';
        INTENTS.forEach((it, i) => $('intentsList').appendChild(intentCard(it, i)));
      }

      async function loadConfig() {
        const res = await fetch('/api/config');
        const data = await res.json();
        $('bizName').textContent = data.businessName || '';
        $('bizSite').textContent = data.website || '';
        $('bizSite').href = data.website || '#';
        INTENTS = data.intents || [];
        renderIntents();
        renderLogs(data.logs || []);
      }

      function renderLogs(logs) {
        $('logs').innerHTML = '';
        logs.slice().reverse().forEach((l) => {
          const li = document.createElement('li');
          li.textContent = `${new Date(l.ts).toLocaleString()} - ${l.from || 'bot'} -> ${l.body}`;
          $('logs').appendChild(li);
        });
      }

      async function saveIntents() {
        const res = await fetch('/api/config/intents', {
          method: 'POST',
          headers: {'Content-Type': 'application/json'},
          body: JSON.stringify({intents: INTENTS})
        });
        const data = await res.json();
        if (!res.ok) { alert('Save failed: ' + data.error); return; }
        alert('Saved');
        loadConfig();
      }

      async function previewIntent() {
        const res = await fetch('/api/preview', {
          method: 'POST',
          headers: {'Content-Type': 'application/json'},
          body: JSON.stringify({message: $('previewInput').value})
        });
        const data = await res.json();
        $('preview').textContent = data.intent
          ? `${data.intent}: ${data.reply}`
          : `No intent (AI fallback, sentiment: ${data.sentiment})`;
      }

      async function sendTest() {
        const res = await fetch('/api/send_test', {
          method: 'POST',
          headers: {'Content-Type': 'application/json'},
          body: JSON.stringify({to: $('testTo').value, message: $('testMsg').value})
        });
        const data = await res.json();
        alert(res.ok ? (data.dispatched ? 'Sent' : 'Not sent, check Twilio config') : data.error);
      }

      $('addIntent').addEventListener('click', () => { INTENTS.push({name: '', patterns: [], reply: ''}); renderIntents(); });
      $('saveBtn').addEventListener('click', saveIntents);
      $('resetBtn').addEventListener('click', loadConfig);
      $('refreshLogs').addEventListener('click', loadConfig);
      $('previewBtn').addEventListener('click', previewIntent);
      $('sendTest').addEventListener('click', sendTest);
      loadConfig();
    </script>
  </body>
</html>
"""


@router.get("/")
async def home():
    """
    Operator dashboard: edit intents, preview matching, review recent messages.
    """
    return Response(content=DASHBOARD_HTML, media_type="text/html")

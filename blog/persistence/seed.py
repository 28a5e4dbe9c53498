"""Bundled article catalog and demo comments.

Records use the same shape as an articles JSON file (see
``blog.persistence.loader``) so either source goes through the same mappers.
"""

AUTHOR = {
    "name": "Luan Frezarin",
    "avatar": "/assets/luan-photo.jpeg",
    "role": "Desenvolvedor Full Stack & Mobile",
    "bio": (
        "Desenvolvedor apaixonado por tecnologia com foco em aplicacoes mobile e web "
        "modernas. Compartilho conhecimento sobre React Native, Flutter, Next.js e todo "
        "o ecossistema de desenvolvimento."
    ),
    "social": {
        "github": "https://github.com/luanfrezarin",
        "linkedin": "https://linkedin.com/in/luanfrezarin",
        "twitter": "https://twitter.com/luanfrezarin",
    },
}

_COVER = "https://images.unsplash.com/{}?w=800&h=500&fit=crop"

ARTICLES = [
    {
        "id": 1,
        "slug": "como-criar-apis-restful-nodejs-express",
        "title": "Como criar APIs RESTful com Node.js e Express",
        "excerpt": "Aprenda a construir APIs robustas e escalaveis usando Node.js, Express e boas praticas de desenvolvimento. Do setup inicial ao deploy.",
        "content": "<p>APIs RESTful sao a base da comunicacao entre aplicacoes modernas.</p><h2>O que e uma API RESTful?</h2><p>REST e um estilo arquitetural para sistemas distribuidos.</p>",
        "date": "2025-01-15",
        "readTime": "8 min de leitura",
        "category": "Backend",
        "coverImage": _COVER.format("photo-1627398242454-45a1465c2479"),
        "views": 3420,
        "likes": 189,
        "tags": ["Node.js", "Express", "API", "REST", "TypeScript"],
        "featured": True,
    },
    {
        "id": 2,
        "slug": "react-native-vs-flutter-qual-escolher",
        "title": "React Native vs Flutter: Qual escolher para seu projeto?",
        "excerpt": "Uma analise completa e imparcial das duas principais tecnologias para desenvolvimento mobile multiplataforma em 2025.",
        "content": "<p>Escolher entre React Native e Flutter e uma das decisoes mais comuns no desenvolvimento mobile.</p>",
        "date": "2025-01-10",
        "readTime": "12 min de leitura",
        "category": "Mobile",
        "coverImage": _COVER.format("photo-1512941937669-90a1b58e7e9c"),
        "views": 5230,
        "likes": 312,
        "tags": ["React Native", "Flutter", "Mobile", "Multiplataforma"],
        "featured": True,
    },
    {
        "id": 3,
        "slug": "tailwind-css-guia-completo",
        "title": "Tailwind CSS: Guia completo do zero ao avancado",
        "excerpt": "Domine o framework CSS mais popular do momento. Aprenda utility-first, customizacao, responsividade e tecnicas avancadas.",
        "content": "<p>Tailwind CSS mudou a forma como escrevemos estilos com a abordagem utility-first.</p>",
        "date": "2025-01-05",
        "readTime": "15 min de leitura",
        "category": "Frontend",
        "coverImage": _COVER.format("photo-1507721999472-8ed4421c4af2"),
        "views": 7890,
        "likes": 534,
        "tags": ["Tailwind CSS", "CSS", "Frontend", "Design"],
    },
    {
        "id": 4,
        "slug": "autenticacao-jwt-nextjs",
        "title": "Autenticacao JWT na pratica com Next.js",
        "excerpt": "Implemente autenticacao segura em suas aplicacoes usando JSON Web Tokens, middleware e refresh tokens.",
        "content": "<p>JSON Web Tokens permitem autenticacao stateless entre cliente e servidor.</p>",
        "date": "2025-01-01",
        "readTime": "10 min de leitura",
        "category": "Seguranca",
        "coverImage": _COVER.format("photo-1555066931-4365d14bab8c"),
        "views": 4230,
        "likes": 198,
        "tags": ["JWT", "Autenticacao", "Seguranca", "Next.js"],
    },
    {
        "id": 5,
        "slug": "deploy-automatizado-github-actions",
        "title": "Deploy automatizado com GitHub Actions",
        "excerpt": "Configure pipelines de CI/CD profissionais para seus projetos usando GitHub Actions. Do teste ao deploy automatico.",
        "content": "<p>GitHub Actions integra CI/CD diretamente ao seu repositorio.</p>",
        "date": "2024-12-28",
        "readTime": "9 min de leitura",
        "category": "DevOps",
        "coverImage": _COVER.format("photo-1618401471353-b98afee0b2eb"),
        "views": 2890,
        "likes": 176,
        "tags": ["GitHub Actions", "CI/CD", "DevOps", "Deploy"],
    },
    {
        "id": 6,
        "slug": "clean-code-principios-essenciais",
        "title": "Clean Code: Principios que todo desenvolvedor precisa saber",
        "excerpt": "Aprenda os principios fundamentais de codigo limpo que vao transformar a qualidade dos seus projetos e sua carreira.",
        "content": "<p>Codigo limpo e codigo facil de ler, entender e modificar.</p>",
        "date": "2024-12-20",
        "readTime": "11 min de leitura",
        "category": "Carreira",
        "coverImage": _COVER.format("photo-1461749280684-dccba630e2f6"),
        "views": 6540,
        "likes": 423,
        "tags": ["Clean Code", "Boas Praticas", "SOLID", "Carreira"],
        "featured": True,
    },
    {
        "id": 7,
        "slug": "typescript-por-que-usar",
        "title": "TypeScript: Por que voce deveria usar em todos os projetos",
        "excerpt": "Descubra como TypeScript previne bugs, melhora a produtividade e torna seu codigo mais robusto e documentado.",
        "content": "<p>TypeScript adiciona tipagem estatica ao JavaScript sem abrir mao da flexibilidade.</p>",
        "date": "2024-12-15",
        "readTime": "10 min de leitura",
        "category": "Frontend",
        "coverImage": _COVER.format("photo-1516116216624-53e697fedbea"),
        "views": 5670,
        "likes": 367,
        "tags": ["TypeScript", "JavaScript", "Tipagem", "Frontend"],
    },
    {
        "id": 8,
        "slug": "docker-para-desenvolvedores",
        "title": "Docker para desenvolvedores: Guia pratico completo",
        "excerpt": "Aprenda Docker do zero: containers, Dockerfile, Docker Compose e como usar no dia a dia do desenvolvimento.",
        "content": "<p>Docker elimina o classico problema de funcionar apenas na sua maquina.</p>",
        "date": "2024-12-08",
        "readTime": "12 min de leitura",
        "category": "DevOps",
        "coverImage": _COVER.format("photo-1605745341112-85968b19335b"),
        "views": 4120,
        "likes": 287,
        "tags": ["Docker", "DevOps", "Containers", "Docker Compose"],
    },
    {
        "id": 9,
        "slug": "microsservicos-vs-monolito",
        "title": "Microsservicos vs Monolito: Quando usar cada abordagem",
        "excerpt": "Entenda as diferencas, vantagens e desvantagens de cada arquitetura e saiba quando escolher uma ou outra.",
        "content": "<p>Nem todo projeto precisa de microsservicos, e nem todo monolito e um problema.</p>",
        "date": "2024-12-01",
        "readTime": "9 min de leitura",
        "category": "Arquitetura",
        "coverImage": _COVER.format("photo-1558494949-ef010cbdcc31"),
        "views": 3780,
        "likes": 245,
        "tags": ["Microsservicos", "Monolito", "Arquitetura", "Backend"],
    },
    {
        "id": 10,
        "slug": "react-hooks-guia-definitivo",
        "title": "React Hooks: Guia definitivo para iniciantes e avancados",
        "excerpt": "Domine todos os hooks do React: useState, useEffect, useContext, useReducer, useMemo, useCallback e hooks customizados.",
        "content": "<p>Hooks trouxeram estado e efeitos para componentes funcionais.</p>",
        "date": "2024-11-25",
        "readTime": "14 min de leitura",
        "category": "Frontend",
        "coverImage": _COVER.format("photo-1633356122544-f134324a6cee"),
        "views": 8340,
        "likes": 567,
        "tags": ["React", "Hooks", "Frontend", "JavaScript"],
    },
    {
        "id": 11,
        "slug": "testes-automatizados-jest-testing-library",
        "title": "Testes automatizados com Jest e Testing Library",
        "excerpt": "Aprenda a escrever testes de qualidade que dao confianca para refatorar e evoluir seu codigo sem medo.",
        "content": "<p>Testes automatizados sao a rede de seguranca de qualquer refatoracao.</p>",
        "date": "2024-11-18",
        "readTime": "11 min de leitura",
        "category": "Frontend",
        "coverImage": _COVER.format("photo-1576444356170-66073FB20e75"),
        "views": 3450,
        "likes": 198,
        "tags": ["Jest", "Testing Library", "Testes", "React"],
    },
    {
        "id": 12,
        "slug": "postgresql-vs-mongodb",
        "title": "PostgreSQL vs MongoDB: Qual banco de dados escolher?",
        "excerpt": "Comparacao detalhada entre SQL e NoSQL para ajudar voce a tomar a melhor decisao para seu projeto.",
        "content": "<p>Relacional ou documento? A resposta depende do formato dos seus dados.</p>",
        "date": "2024-11-10",
        "readTime": "10 min de leitura",
        "category": "Banco de Dados",
        "coverImage": _COVER.format("photo-1544383835-bda2bc66a55d"),
        "views": 4560,
        "likes": 278,
        "tags": ["PostgreSQL", "MongoDB", "Banco de Dados", "SQL", "NoSQL"],
    },
    {
        "id": 13,
        "slug": "design-patterns-javascript",
        "title": "Design Patterns essenciais em JavaScript e TypeScript",
        "excerpt": "Aprenda os padroes de projeto mais uteis para escrever codigo JavaScript/TypeScript mais organizado e reutilizavel.",
        "content": "<p>Padroes de projeto sao solucoes reutilizaveis para problemas recorrentes.</p>",
        "date": "2024-11-05",
        "readTime": "13 min de leitura",
        "category": "Arquitetura",
        "coverImage": _COVER.format("photo-1504639725590-34d0984388bd"),
        "views": 3120,
        "likes": 201,
        "tags": ["Design Patterns", "JavaScript", "TypeScript", "Arquitetura"],
    },
    {
        "id": 14,
        "slug": "performance-web-otimizacao",
        "title": "Performance Web: Otimizando seu site para velocidade maxima",
        "excerpt": "Tecnicas praticas para melhorar Core Web Vitals, tempo de carregamento e experiencia do usuario.",
        "content": "<p>Cada segundo de carregamento custa visitantes e conversoes.</p>",
        "date": "2024-10-28",
        "readTime": "10 min de leitura",
        "category": "Frontend",
        "coverImage": _COVER.format("photo-1460925895917-afdab827c52f"),
        "views": 2980,
        "likes": 167,
        "tags": ["Performance", "Web Vitals", "Otimizacao", "Frontend"],
    },
    {
        "id": 15,
        "slug": "git-avancado-comandos-essenciais",
        "title": "Git avancado: Comandos que vao transformar seu workflow",
        "excerpt": "Va alem do basico com Git. Aprenda rebase interativo, cherry-pick, stash, bisect e estrategias de branching.",
        "content": "<p>Conhecer bem o Git economiza horas de trabalho e evita dores de cabeca.</p>",
        "date": "2024-10-20",
        "readTime": "11 min de leitura",
        "category": "DevOps",
        "coverImage": _COVER.format("photo-1556075798-4825dfaaf498"),
        "views": 5230,
        "likes": 345,
        "tags": ["Git", "Versionamento", "DevOps", "Workflow"],
    },
]

COMMENTS = [
    {
        "id": "5b0e7a3c-9d1f-4c25-8a6e-0f3d2b1c4a01",
        "postSlug": "como-criar-apis-restful-nodejs-express",
        "author": "Maria Silva",
        "email": "maria@example.com",
        "content": "Excelente artigo! Me ajudou muito a entender a estrutura de uma API profissional. Parabens pelo conteudo!",
        "date": "2025-01-16T10:30:00Z",
    },
    {
        "id": "5b0e7a3c-9d1f-4c25-8a6e-0f3d2b1c4a02",
        "postSlug": "como-criar-apis-restful-nodejs-express",
        "author": "Pedro Santos",
        "email": "pedro@example.com",
        "content": "Muito bom! Voce poderia fazer um artigo sobre GraphQL tambem? Seria otimo ter essa comparacao.",
        "date": "2025-01-17T14:20:00Z",
    },
    {
        "id": "5b0e7a3c-9d1f-4c25-8a6e-0f3d2b1c4a03",
        "postSlug": "react-hooks-guia-definitivo",
        "author": "Ana Costa",
        "email": "ana@example.com",
        "content": "Finalmente entendi useCallback e useMemo! A explicacao ficou muito clara. Obrigada!",
        "date": "2025-01-18T09:15:00Z",
    },
    {
        "id": "5b0e7a3c-9d1f-4c25-8a6e-0f3d2b1c4a04",
        "postSlug": "clean-code-principios-essenciais",
        "author": "Carlos Oliveira",
        "email": "carlos@example.com",
        "content": "Clean Code e uma leitura obrigatoria. Esse resumo ficou muito bom para referencia rapida.",
        "date": "2025-01-19T16:45:00Z",
    },
    {
        "id": "5b0e7a3c-9d1f-4c25-8a6e-0f3d2b1c4a05",
        "postSlug": "tailwind-css-guia-completo",
        "author": "Julia Mendes",
        "email": "julia@example.com",
        "content": "Mudou minha forma de escrever CSS completamente. Tailwind e incrivel e esse guia cobre tudo!",
        "date": "2025-01-20T11:00:00Z",
    },
]
